#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# Make project modules importable when run as a script
PROJECT_ROOT = Path(__file__).parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from core.config_loader import load_config
from read_human import (
    ParseError,
    PromptIOError,
    read_choice,
    read_custom_nonempty,
)


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def from_cmd(cls, config=None) -> "Gender":
        members = list(cls)
        idx = read_choice("What is your gender", [g.value for g in members], None, config=config)
        return members[idx]


@dataclass
class Name:
    given: str
    family: str

    @classmethod
    def from_str(cls, text: str) -> "Name":
        # Assumes the family name comes last
        parts = text.split(None, 1)
        if len(parts) != 2:
            raise ParseError("give both a given and a family name")
        return cls(given=parts[0], family=parts[1].strip())


@dataclass
class Person:
    name: Name
    age: int
    gender: Gender


def parse_age(text: str) -> int:
    age = int(text.strip())
    if not 0 <= age <= 150:
        raise ParseError("age must be between 0 and 150")
    return age


def main():
    config = load_config()
    try:
        name = read_custom_nonempty("What is your name", Name.from_str, config=config)
        age = read_custom_nonempty("What is your age", parse_age, config=config)
        gender = Gender.from_cmd(config)
    except PromptIOError as e:
        print(f"\n[ERROR] {e}")
        return 1
    except KeyboardInterrupt:
        print("\nGoodbye!")
        return 130

    print(Person(name=name, age=age, gender=gender))
    return 0


if __name__ == "__main__":
    sys.exit(main())
