# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

import typing

from frozendict import frozendict
from pydantic_core import core_schema


if typing.TYPE_CHECKING:
    import pydantic
    import rich.repr


# Pydantic support for frozendict, validated as a dict and frozen afterwards
class PydanticFrozenDictAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: typing.Any, handler: pydantic.GetCoreSchemaHandler) -> core_schema.CoreSchema:
        schema = core_schema.chain_schema(
            [
                handler.generate_schema(dict[*typing.get_args(source_type)]),  # pyright: ignore[reportInvalidTypeArguments]
                core_schema.no_info_plain_validator_function(frozendict),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=schema,
            python_schema=schema,
            serialization=core_schema.plain_serializer_function_ser_schema(dict),
        )


_K = typing.TypeVar("_K")
_V = typing.TypeVar("_V")
FrozenDict = typing.Annotated[frozendict[_K, _V], PydanticFrozenDictAnnotation]


# Rich repr support, so frozen mappings pretty-print like dicts
def frozendict_rich_repr(self: frozendict) -> rich.repr.Result:
    for key, value in self.items():
        yield str(key), value


frozendict.__rich_repr__ = frozendict_rich_repr  # pyright: ignore[reportAttributeAccessIssue]
