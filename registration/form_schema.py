"""Field-schema descriptor for the retailer registration workflow.

Each field is described once (step, label, whether it is required, an
optional pattern or fixed set of choices and whether free text is
title-cased), and the workflow validates and normalises drafts from that
description alone.
"""
import re
from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from registration.utils import get_value, to_title_case


# Matched with fullmatch; [0-9] keeps out non-ASCII digits
PHONE_PATTERN = re.compile(r'[0-9]{10}')
EMAIL_PATTERN = re.compile(r'\S+@\S+\.\S+')
PINCODE_PATTERN = re.compile(r'[0-9]{6}')

STEP_BUSINESS_INFO = 1
STEP_LOCATION_INFO = 2


@dataclass(frozen=True)
class FieldSpec:
    name: str
    step: int
    label: str
    required: bool = False
    pattern: Optional[re.Pattern] = None
    pattern_message: str = ''
    title_case: bool = True
    choices: tuple = ()

    def validate(self, draft) -> Optional[str]:
        value = get_value(draft, self.name)
        if not isinstance(value, str):
            value = '' if value is None else str(value)

        if not value.strip():
            if self.required:
                return f"{self.label} is required"
            return None

        if self.choices and value not in self.choices:
            return f"Please select a valid {self.label.lower()}"
        if self.pattern is not None and not self.pattern.fullmatch(value):
            return self.pattern_message
        return None


class FormSchema:
    def __init__(self, fields):
        self.fields = list(fields)
        self._by_name = {field.name: field for field in self.fields}

    @property
    def steps(self):
        return sorted({field.step for field in self.fields})

    def field(self, name):
        return self._by_name.get(name)

    def choices(self, name):
        field = self.field(name)
        return list(field.choices) if field is not None else []

    def fields_for_step(self, step):
        return [field for field in self.fields if field.step == step]

    def validate_step(self, draft, step):
        errors = {}
        for field in self.fields_for_step(step):
            message = field.validate(draft)
            if message:
                errors[field.name] = message
        return errors

    def normalize(self, name, value):
        field = self.field(name)
        if field is not None and field.title_case and isinstance(value, str):
            return to_title_case(value)
        return value


def build_retailer_schema(require_owner=True, categories=None):
    if categories is None:
        categories = settings.BUSINESS_CATEGORIES

    return FormSchema([
        # Step 1: business information
        FieldSpec(
            'businessCategory', STEP_BUSINESS_INFO, 'Business category', required=True,
            title_case=False, choices=tuple(categories),
        ),
        FieldSpec('ownerName', STEP_BUSINESS_INFO, 'Owner name', required=require_owner),
        FieldSpec('shopName', STEP_BUSINESS_INFO, 'Shop name', required=True),
        FieldSpec(
            'shopPhone', STEP_BUSINESS_INFO, 'Phone number', required=True,
            pattern=PHONE_PATTERN, pattern_message='Phone number must be exactly 10 digits',
        ),
        FieldSpec(
            'email', STEP_BUSINESS_INFO, 'Email', required=True,
            pattern=EMAIL_PATTERN, pattern_message='Invalid email format', title_case=False,
        ),
        FieldSpec('website', STEP_BUSINESS_INFO, 'Website', title_case=False),

        # Step 2: location information
        FieldSpec('address.street', STEP_LOCATION_INFO, 'Address', required=True),
        FieldSpec(
            'address.pincode', STEP_LOCATION_INFO, 'PIN code', required=True,
            pattern=PINCODE_PATTERN, pattern_message='PIN code must be exactly 6 digits',
        ),
        FieldSpec('address.village', STEP_LOCATION_INFO, 'Village/Colony'),
        FieldSpec('address.taluka', STEP_LOCATION_INFO, 'Taluka'),
        FieldSpec('address.district', STEP_LOCATION_INFO, 'District'),
        FieldSpec('address.state', STEP_LOCATION_INFO, 'State', required=True),
        FieldSpec('address.country', STEP_LOCATION_INFO, 'Country'),
    ])


RETAILER_SCHEMA = build_retailer_schema()
