"""Per-chat code form: normalize, validate, encode, commit."""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from .config import FORM_LIMIT
from .interfaces import ICodeEncoder, ILogSink
from .normalizer import normalize
from .validator import ValidationState, validate

ENCODING_FAILED = "Failed to generate QR code"


@dataclass(frozen=True)
class FormSnapshot:
    """Visible form state after a committed transition."""
    code: str = ""
    error: Optional[str] = None
    artifact: Optional[bytes] = None

    @property
    def validation(self) -> ValidationState:
        return validate(self.code)


class CodeForm:
    """Reactive pipeline for a single code field.

    Every change of the normalized code bumps ``revision``. An encode
    result is committed only while the revision it was requested under is
    still current; late results for an older code are dropped.
    """

    def __init__(self, encoder: ICodeEncoder, logger: ILogSink):
        self.encoder = encoder
        self.logger = logger
        self.code = ""
        self.error: Optional[str] = None
        self.artifact: Optional[bytes] = None
        self.revision = 0
        self.pending = False

    @property
    def validation(self) -> ValidationState:
        return validate(self.code)

    def snapshot(self) -> FormSnapshot:
        return FormSnapshot(
            code=self.code, error=self.error, artifact=self.artifact
        )

    def reset(self) -> FormSnapshot:
        """Return to the empty state, invalidating pending encodes."""
        self._transition("")
        return self.snapshot()

    def _stalled(self) -> bool:
        """Complete code whose encode never finished (e.g. cancelled)."""
        return (
            self.validation.is_valid
            and self.artifact is None
            and self.error is None
        )

    def _transition(self, code: str) -> ValidationState:
        self.revision += 1
        self.code = code
        self.pending = False
        self.artifact = None
        state = validate(code)
        self.error = state.message
        return state

    async def update(self, raw: str) -> Optional[FormSnapshot]:
        """Feed new raw field contents through the pipeline.

        Returns the committed snapshot, or None when a newer edit
        superseded this one while the encoder was running (or when the
        same code is already being encoded). Resending a complete code
        whose encode was interrupted runs the encoder again.
        """
        code = normalize(raw)
        if code == self.code and (self.pending or not self._stalled()):
            # unchanged; an in-flight encode for this code will report
            return None if self.pending else self.snapshot()

        state = self._transition(code)
        if not state.is_valid:
            return self.snapshot()

        revision = self.revision
        self.pending = True
        try:
            artifact = await self.encoder.encode(code)
        except Exception as e:
            if revision != self.revision:
                self.logger.log("debug", f"Dropped stale failure for {code}")
                return None
            self.logger.log("error", f"Error generating QR code: {e}")
            self.error = ENCODING_FAILED
            return self.snapshot()
        finally:
            # also covers cancellation while the encoder is suspended
            if revision == self.revision:
                self.pending = False

        if revision != self.revision:
            self.logger.log("debug", f"Dropped stale QR code for {code}")
            return None

        self.artifact = artifact
        self.error = None
        return self.snapshot()


class FormRegistry:
    """One CodeForm per chat, created lazily.

    At most ``limit`` forms are kept; the least recently used chat is
    evicted (and starts from an empty form on its next message).
    """

    def __init__(
        self,
        encoder: ICodeEncoder,
        logger: ILogSink,
        limit: int = FORM_LIMIT
    ):
        self.encoder = encoder
        self.logger = logger
        self.limit = limit
        self._forms: "OrderedDict[int, CodeForm]" = OrderedDict()

    def get(self, chat_id: int) -> CodeForm:
        form = self._forms.get(chat_id)
        if form is not None:
            self._forms.move_to_end(chat_id)
            return form

        form = CodeForm(self.encoder, self.logger)
        self._forms[chat_id] = form
        while len(self._forms) > self.limit:
            evicted, _ = self._forms.popitem(last=False)
            self.logger.log("debug", f"Evicted form for chat {evicted}")
        return form

    def __contains__(self, chat_id: int) -> bool:
        return chat_id in self._forms

    def __len__(self) -> int:
        return len(self._forms)
