from .notification_service import NotificationService, TOAST_MESSAGES
from .toasts import ToastQueue, ToastScheduler, generate_toast_id

__all__ = [
    "NotificationService",
    "TOAST_MESSAGES",
    "ToastQueue",
    "ToastScheduler",
    "generate_toast_id",
]
