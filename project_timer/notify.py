"""Desktop notifications"""

import logging

from plyer import notification

logger = logging.getLogger(__name__)


class NotificationManager:
    """Shows native OS notifications through plyer"""
    def __init__(self, enabled=True, app_name="Project Timer"):
        self.enabled = enabled
        self.app_name = app_name

    def show(self, title, message):
        if not self.enabled:
            return False
        try:
            notification.notify(title=title, message=message,
                                app_name=self.app_name, timeout=10)
        except Exception as e:
            # plyer raises NotImplementedError when no backend exists
            logger.warning("Notification error: %s", e)
            return False
        return True
