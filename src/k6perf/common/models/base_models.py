# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class K6PerfBaseModel(BaseModel):
    """Base model for all k6perf models.

    Fields are declared in snake_case and serialized under camelCase aliases, which
    is the key layout of the JSON reports (``totalRequests``, ``errorRate``, ...).
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON using the report (camelCase) key names."""
        return self.model_dump_json(indent=indent, by_alias=True)


class K6PerfFrozenModel(K6PerfBaseModel):
    """Immutable variant of :class:`K6PerfBaseModel`."""

    model_config = ConfigDict(frozen=True)
