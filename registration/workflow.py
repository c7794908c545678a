"""Two-step retailer registration/edit workflow.

    STEP1_BUSINESS_INFO --next (valid)--> STEP2_LOCATION_INFO
    STEP2_LOCATION_INFO --previous------> STEP1_BUSINESS_INFO
    STEP2_LOCATION_INFO --submit (valid)--> SUBMITTING --ok--> SUCCESS
                                                       --fail-> STEP2_LOCATION_INFO
    SUCCESS --after REGISTRATION_RESET_SECONDS--> STEP1_BUSINESS_INFO (cleared draft)

Loading a saved record for editing jumps to step 1 with the record as the
draft; submitting from there updates instead of creating.
"""
import copy
import enum
import logging

from django.conf import settings

from registration import notifications
from registration.form_schema import RETAILER_SCHEMA, STEP_BUSINESS_INFO, STEP_LOCATION_INFO, PINCODE_PATTERN
from registration.utils import empty_draft, draft_from_record, get_value, set_value

logger = logging.getLogger(__name__)

PINCODE_FIELD = 'address.pincode'


class WorkflowState(enum.Enum):
    STEP1_BUSINESS_INFO = 'step1_business_info'
    STEP2_LOCATION_INFO = 'step2_location_info'
    SUBMITTING = 'submitting'
    SUCCESS = 'success'


EDITABLE_STATES = (WorkflowState.STEP1_BUSINESS_INFO, WorkflowState.STEP2_LOCATION_INFO)


class RegistrationWorkflow:
    def __init__(self, api, pincode_service, notifier, scheduler, schema=None,
                 on_saved=None, reset_delay=None):
        self.api = api
        self.pincode_service = pincode_service
        self.notifier = notifier
        self.scheduler = scheduler
        self.schema = schema or RETAILER_SCHEMA
        self.on_saved = on_saved
        self.reset_delay = settings.REGISTRATION_RESET_SECONDS if reset_delay is None else reset_delay

        self.last_category = ''
        self.success_message = ''
        self._reset_event = None
        self.reset()

    # -- read-only helpers ---------------------------------------------------

    @property
    def current_step(self):
        if self.state == WorkflowState.STEP1_BUSINESS_INFO:
            return STEP_BUSINESS_INFO
        return STEP_LOCATION_INFO

    @property
    def is_submitting(self):
        return self.state == WorkflowState.SUBMITTING

    @property
    def is_editing(self):
        return self.edit_target is not None

    @property
    def submit_label(self):
        if self.is_submitting:
            return 'Updating...' if self.is_editing else 'Submitting...'
        return 'Update Retailer' if self.is_editing else 'Submit Registration'

    @property
    def categories(self):
        return self.schema.choices('businessCategory')

    # -- lifecycle -----------------------------------------------------------

    def reset(self):
        self._cancel_reset()
        self.draft = empty_draft(category=self.last_category, country=settings.DEFAULT_COUNTRY)
        self.errors = {}
        self.edit_target = None
        self.success_message = ''
        self.state = WorkflowState.STEP1_BUSINESS_INFO

    def load_for_edit(self, record):
        self._cancel_reset()
        self.draft = draft_from_record(record)
        self.errors = {}
        self.edit_target = record.get('id')
        self.success_message = ''
        self.state = WorkflowState.STEP1_BUSINESS_INFO
        logger.info(f"Editing shop {self.edit_target}")

    # -- field input ---------------------------------------------------------

    def set_field(self, name, value):
        if self.state not in EDITABLE_STATES:
            logger.debug(f"Ignoring change to {name} while {self.state.value}")
            return False

        set_value(self.draft, name, self.schema.normalize(name, value))
        self.errors.pop(name, None)

        if name == PINCODE_FIELD:
            self._resolve_pincode(get_value(self.draft, PINCODE_FIELD))
        return True

    def _resolve_pincode(self, pincode):
        if not isinstance(pincode, str) or not PINCODE_PATTERN.fullmatch(pincode):
            return

        result = self.pincode_service.lookup(pincode)
        if not result.get("success"):
            self.notifier.show(
                'Failed to fetch location data. Please enter it manually.',
                notifications.ERROR,
            )
            return

        for field, value in result["address"].items():
            if value:
                name = f"address.{field}"
                set_value(self.draft, name, value)
                self.errors.pop(name, None)

    # -- transitions ---------------------------------------------------------

    def next(self):
        if self.state != WorkflowState.STEP1_BUSINESS_INFO:
            return False

        errors = self.schema.validate_step(self.draft, STEP_BUSINESS_INFO)
        if errors:
            self.errors = errors
            return False

        self.errors = {}
        self.state = WorkflowState.STEP2_LOCATION_INFO
        return True

    def previous(self):
        if self.state != WorkflowState.STEP2_LOCATION_INFO:
            return False
        self.state = WorkflowState.STEP1_BUSINESS_INFO
        return True

    def submit(self):
        # SUBMITTING is not accepted here, so a second submit is a no-op
        if self.state != WorkflowState.STEP2_LOCATION_INFO:
            return False

        errors = self.schema.validate_step(self.draft, STEP_LOCATION_INFO)
        if errors:
            self.errors = errors
            self.notifier.show('Please fix the errors before submitting.', notifications.ERROR)
            return False

        self.errors = {}
        self.state = WorkflowState.SUBMITTING
        payload = copy.deepcopy(self.draft)

        if self.is_editing:
            result = self.api.update_shop(self.edit_target, payload)
        else:
            result = self.api.create_shop(payload)

        if not result.get("success"):
            logger.error(f"Submit failed: {result.get('error')}")
            self.state = WorkflowState.STEP2_LOCATION_INFO
            self.notifier.show(
                f"Operation failed: {result.get('error') or 'unknown error'}",
                notifications.ERROR,
            )
            return False

        self.last_category = self.draft.get('businessCategory', '')
        if self.is_editing:
            self.notifier.show('Retailer updated successfully!', notifications.SUCCESS)
        else:
            self.notifier.show('Registration submitted successfully!', notifications.SUCCESS)

        self.success_message = 'Operation completed successfully!'
        self.state = WorkflowState.SUCCESS
        self._reset_event = self.scheduler.enter(self.reset_delay, 1, self._finish)

        if self.on_saved is not None:
            self.on_saved(result.get("data"))
        return True

    def _finish(self):
        self._reset_event = None
        self.reset()

    def _cancel_reset(self):
        if self._reset_event is not None:
            self.scheduler.cancel(self._reset_event)
            self._reset_event = None
