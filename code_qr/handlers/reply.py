"""Send a rendered view to a chat."""

from ..interfaces import IMessagingProvider
from ..view import View


async def send_view(
    messaging: IMessagingProvider, chat_id: int, view: View
) -> None:
    """Photo with caption when there is an image, plain text otherwise."""
    if view.image is not None:
        await messaging.send_photo(chat_id, view.image, caption=view.text)
        return

    await messaging.send_message(chat_id, view.text)
