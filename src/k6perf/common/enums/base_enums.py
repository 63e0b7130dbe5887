# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from enum import Enum
from functools import cached_property

from pydantic import BaseModel, Field
from typing_extensions import Self


class CaseInsensitiveStrEnum(str, Enum):
    """
    String enumeration whose members compare and look up case-insensitively,
    so ``AlertLevel("critical") is AlertLevel.CRITICAL``.
    """

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.value.lower() == other.lower()
        if isinstance(other, Enum):
            return self.value.lower() == other.value.lower()
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self.value.lower())

    @classmethod
    def _missing_(cls, value):
        """Return the member matching ``value`` case-insensitively, or None."""
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class BasePydanticEnumInfo(BaseModel):
    """Information attached to a member of a :class:`BasePydanticBackedStrEnum`.

    ``tag`` is the string value of the member; subclasses add whatever else the
    member needs to carry."""

    tag: str = Field(
        ...,
        min_length=1,
        description="The string value of the enum member used for lookup and serialization.",
    )

    def __str__(self) -> str:
        return self.tag


class BasePydanticBackedStrEnum(CaseInsensitiveStrEnum):
    """
    A :class:`CaseInsensitiveStrEnum` whose members are declared with a
    :class:`BasePydanticEnumInfo`. Members behave like plain strings and expose the
    declaration through :attr:`info`.
    """

    def __new__(cls, info: BasePydanticEnumInfo) -> Self:
        obj = str.__new__(cls, info.tag)
        obj._value_ = info.tag
        obj._info = info  # type: ignore
        return obj

    @cached_property
    def info(self) -> BasePydanticEnumInfo:
        """Get the enum info for the enum member."""
        return self._info  # type: ignore
