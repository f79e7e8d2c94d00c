"""Interface definitions for code QR bot adapters."""

from .i_code_encoder import ICodeEncoder, EncoderOptions, EncodingError
from .i_messaging_provider import IMessagingProvider
from .i_log_sink import ILogSink, LogLevel

__all__ = [
    'ICodeEncoder',
    'EncoderOptions',
    'EncodingError',
    'IMessagingProvider',
    'ILogSink',
    'LogLevel',
]
