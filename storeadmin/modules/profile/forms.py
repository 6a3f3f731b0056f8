"""
Profile form input and validation.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional

# Leading ASCII digits with an optional sign; anything after them is ignored
_LEADING_INT = re.compile(r'[+-]?\d+', re.ASCII)

# Largest value a portable INTEGER column holds
MAX_AGE = 2 ** 31 - 1


def sanitize_text(value) -> str:
    return str(value).strip() if value is not None else ""


def parse_leading_int(value: str) -> Optional[int]:
    """Integer prefix of ``value`` ("30abc" -> 30, "3.5" -> 3), None when there is none"""
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(0))


@dataclass
class ProfileInput:
    name: str
    age: str

    @classmethod
    def from_form(cls, form) -> "ProfileInput":
        """Build from a submitted form (or any mapping), trimming both fields"""
        return cls(
            name=sanitize_text(form.get('name')),
            age=sanitize_text(form.get('age')),
        )

    @property
    def age_value(self) -> Optional[int]:
        return parse_leading_int(self.age)

    def validate(self) -> Dict[str, str]:
        """Map of field -> message for every rule the input breaks"""
        errors = {}
        if not self.name:
            errors['name'] = "Name is required"

        age = self.age_value
        if not self.age:
            errors['age'] = "Age is required"
        elif age is None or age < 0 or age > MAX_AGE:
            errors['age'] = "Age must be a valid non-negative number"

        return errors

    def values(self) -> Dict[str, str]:
        return {'name': self.name, 'age': self.age}
