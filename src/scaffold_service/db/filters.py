"""
scaffold_service.db.filters

Translate delegate query arguments into SQLAlchemy expressions.

Responsibilities:
- `where`: field equality, per-field operators and AND/OR/NOT nesting.
- `order_by`: `{"field": "asc" | "desc"}` or a list of such mappings.
- `select`: field projection as a list of names or `{"field": True}`.

Supported field operators: equals, not, in, not_in, lt, lte, gt, gte,
contains, starts_with, ends_with.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from sqlalchemy import JSON, ColumnElement, and_, inspect, not_, or_, true
from sqlalchemy.orm import InstrumentedAttribute

from scaffold_service.db.base import Base

Where = Mapping[str, Any]
OrderBy = Mapping[str, str] | Iterable[Mapping[str, str]]
Select = Iterable[str] | Mapping[str, bool]

_LOGICAL = ("AND", "OR", "NOT")


def _equals(column: InstrumentedAttribute, value: Any) -> ColumnElement[bool]:
    return column.is_(None) if value is None else column == value


def _not(column: InstrumentedAttribute, value: Any) -> ColumnElement[bool]:
    if isinstance(value, Mapping):
        return not_(_field_clause(column, value))
    return column.is_not(None) if value is None else column != value


_OPERATORS: dict[str, Callable[[InstrumentedAttribute, Any], ColumnElement[bool]]] = {
    "equals": _equals,
    "not": _not,
    "in": lambda c, v: c.in_(list(v)),
    "not_in": lambda c, v: c.not_in(list(v)),
    "lt": operator.lt,
    "lte": operator.le,
    "gt": operator.gt,
    "gte": operator.ge,
    "contains": lambda c, v: c.contains(v, autoescape=True),
    "starts_with": lambda c, v: c.startswith(v, autoescape=True),
    "ends_with": lambda c, v: c.endswith(v, autoescape=True),
}


def column_names(model: type[Base]) -> list[str]:
    return [attr.key for attr in inspect(model).column_attrs]


def _column(model: type[Base], name: str) -> InstrumentedAttribute:
    if name not in column_names(model):
        raise ValueError(f"{model.__name__} has no field {name!r}")
    return getattr(model, name)


def _field_clause(column: InstrumentedAttribute, ops: Mapping[str, Any]) -> ColumnElement[bool]:
    clauses = []
    for op, operand in ops.items():
        try:
            apply = _OPERATORS[op]
        except KeyError:
            raise ValueError(f"Unsupported filter operator {op!r}") from None
        clauses.append(apply(column, operand))
    return and_(true(), *clauses)


def _as_list(value: Where | Iterable[Where]) -> list[Where]:
    return [value] if isinstance(value, Mapping) else list(value)


def build_where(model: type[Base], where: Where | None) -> list[ColumnElement[bool]]:
    """Return the clauses for `where`; callers splat them into `.where(*clauses)`."""
    clauses: list[ColumnElement[bool]] = []
    for key, value in (where or {}).items():
        if key in _LOGICAL:
            nested = [and_(true(), *build_where(model, w)) for w in _as_list(value)]
            if key == "AND":
                clauses.append(and_(true(), *nested))
            elif key == "OR":
                clauses.append(or_(*nested))
            else:
                clauses.append(not_(and_(true(), *nested)))
            continue

        column = _column(model, key)
        if isinstance(value, Mapping) and not _is_json_column(model, key):
            clauses.append(_field_clause(column, value))
        else:
            clauses.append(_equals(column, value))
    return clauses


def _is_json_column(model: type[Base], name: str) -> bool:
    # JSON columns compare whole documents; a dict value there is data, not operators.
    return isinstance(inspect(model).columns[name].type, JSON)


def build_order_by(model: type[Base], order_by: OrderBy | None) -> list[ColumnElement[Any]]:
    if not order_by:
        return []
    terms: list[ColumnElement[Any]] = []
    for spec in _as_list(order_by):
        for name, direction in spec.items():
            column = _column(model, name)
            if direction == "asc":
                terms.append(column.asc())
            elif direction == "desc":
                terms.append(column.desc())
            else:
                raise ValueError(f"Sort direction must be 'asc' or 'desc', got {direction!r}")
    return terms


def selected_fields(model: type[Base], select: Select | None) -> list[str]:
    if select is None:
        return column_names(model)
    names = [k for k, v in select.items() if v] if isinstance(select, Mapping) else list(select)
    for name in names:
        _column(model, name)
    return names


def check_fields(model: type[Base], data: Mapping[str, Any]) -> None:
    for name in data:
        _column(model, name)


def to_dict(instance: Base, fields: list[str]) -> dict[str, Any]:
    return {name: getattr(instance, name) for name in fields}


# --- Module Notes -----------------------------------------------------------
# Unknown fields and operators raise ValueError before any SQL is emitted.
