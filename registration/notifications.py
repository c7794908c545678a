import logging
from collections import deque
from dataclasses import dataclass

from django.conf import settings

logger = logging.getLogger(__name__)

SUCCESS = 'success'
ERROR = 'error'
INFO = 'info'
KINDS = (SUCCESS, ERROR, INFO)
HISTORY_LIMIT = 50


@dataclass
class Notification:
    message: str
    kind: str = SUCCESS


class NotificationQueue:
    """Transient user notifications, one visible at a time.

    The active item is dismissed by a timer on the shared scheduler; queued
    items are shown in arrival order.
    """

    def __init__(self, scheduler, timeout=None):
        self.scheduler = scheduler
        self.timeout = settings.NOTIFICATION_TIMEOUT_SECONDS if timeout is None else timeout
        self.active = None
        self.pending = deque()
        self.history = deque(maxlen=HISTORY_LIMIT)
        self._timer = None

    def show(self, message, kind=SUCCESS):
        if kind not in KINDS:
            raise ValueError(f"Unknown notification kind: {kind}")

        notification = Notification(message=message, kind=kind)
        self.history.append(notification)
        log = logger.error if kind == ERROR else logger.info
        log(f"Notification [{kind}]: {message}")

        if self.active is None:
            self._activate(notification)
        else:
            self.pending.append(notification)
        return notification

    def dismiss(self):
        if self._timer is not None:
            self.scheduler.cancel(self._timer)
            self._timer = None

        self.active = None
        if self.pending:
            self._activate(self.pending.popleft())

    def clear(self):
        self.pending.clear()
        self.dismiss()

    def _activate(self, notification):
        self.active = notification
        self._timer = self.scheduler.enter(self.timeout, 1, self._expire)

    def _expire(self):
        self._timer = None
        self.dismiss()
