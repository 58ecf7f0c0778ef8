from .relay import AudioRelay
from .messages import ProviderMessage, decode_provider_message

__all__ = ["AudioRelay", "ProviderMessage", "decode_provider_message"]
