import logging

from registration.details import ShopDetailsView
from registration.notifications import NotificationQueue
from registration.services.directory_api import DirectoryAPIService
from registration.services.pincode_service import PincodeLookupService
from registration.shortcuts import KeyEventSource, bind_workflow_shortcuts
from registration.utils import make_scheduler
from registration.workflow import RegistrationWorkflow

logger = logging.getLogger(__name__)


class RegistrationApp:
    """Root controller: owns the timers, notifications and both views."""

    def __init__(self, api=None, pincode_service=None, scheduler=None, keys=None, schema=None):
        self.scheduler = scheduler or make_scheduler()
        self.notifications = NotificationQueue(self.scheduler)
        self.api = api or DirectoryAPIService()
        self.pincode_service = pincode_service or PincodeLookupService()
        self.keys = keys or KeyEventSource()

        self.workflow = RegistrationWorkflow(
            api=self.api,
            pincode_service=self.pincode_service,
            notifier=self.notifications,
            scheduler=self.scheduler,
            schema=schema,
            on_saved=self._on_saved,
        )
        self.details = ShopDetailsView(
            api=self.api,
            notifier=self.notifications,
            scheduler=self.scheduler,
            workflow=self.workflow,
        )
        self._unbind_shortcuts = bind_workflow_shortcuts(self.keys, self.workflow)

    def _on_saved(self, shop):
        self.details.refresh()

    def tick(self):
        """Run every timer event that is due. Called by the host's event loop."""
        self.scheduler.run(blocking=False)

    def show_details(self):
        self.details.open()

    def hide_details(self):
        self.details.close()

    def unmount(self):
        if self._unbind_shortcuts is not None:
            self._unbind_shortcuts()
            self._unbind_shortcuts = None

        self.details.close()
        self.workflow.reset()
        self.notifications.clear()
        logger.info("Registration app unmounted")
