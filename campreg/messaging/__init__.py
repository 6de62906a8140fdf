"""WhatsApp approval messaging via UltraMsg."""

from .outcome import SendOutcome, SendStatus, decode_send_response
from .phone import COUNTRY_PREFIX, is_valid_moroccan_phone, normalize_phone
from .ultramsg import APPROVAL_MESSAGE, UltraMsgClient

__all__ = [
    "APPROVAL_MESSAGE",
    "COUNTRY_PREFIX",
    "SendOutcome",
    "SendStatus",
    "UltraMsgClient",
    "decode_send_response",
    "is_valid_moroccan_phone",
    "normalize_phone",
]
