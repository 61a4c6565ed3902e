"""Name/Age example subject and its checks."""

from dataclasses import dataclass

from propchain.validation.accessors import attr
from propchain.validation.chain import Check
from propchain.validation.predicates import at_least, not_blank

ADULT_AGE = 18


@dataclass(frozen=True)
class Person:
    name: str
    age: int


PERSON_CHECKS = [
    Check(attr("Name", "name"), not_blank, "Name cannot be empty"),
    Check(attr("Age", "age"), at_least(ADULT_AGE), f"Must be {ADULT_AGE}+"),
]
