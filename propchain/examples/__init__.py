from .person import ADULT_AGE, PERSON_CHECKS, Person

__all__ = [
    "ADULT_AGE",
    "PERSON_CHECKS",
    "Person",
]
