"""
Usage Binder — Records which schema type every selected field belongs to.

The binder walks a parsed document depth-first (graphql-core visit()) and
keeps an explicit stack of type contexts:

  operation definition   pending context = schema root type for the operation
                         kind (query / mutation / subscription)
  fragment definition    pending context = type named in "on X"
  inline fragment        pending context = its type condition, or the
                         current context when it has none
  field                  records (current context, field name), then sets the
                         pending context to the field's return type with
                         list / non-null wrappers removed
  selection set          enter: push pending context; leave: pop

Every selection set is entered right after its owner (operation, fragment,
inline fragment or field), so the pending context always belongs to it.

Fields are recorded by name only. Nothing checks that the field exists on
the parent type; fields under a context the schema cannot resolve (unknown
type names, scalar positions) are skipped silently.

Fragment spreads are not followed. A fragment's fields are counted where the
fragment is defined, against the type in its "on" clause.

Every occurrence recorded from one literal carries the same line: the line
of the literal's opening backtick.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from graphql import (
    GraphQLSchema,
    OperationType,
    SchemaMetaFieldDef,
    TypeMetaFieldDef,
    TypeNameMetaFieldDef,
    Visitor,
    get_named_type,
    is_composite_type,
    is_interface_type,
    is_object_type,
    visit,
)


@dataclass(frozen=True)
class FieldUsageLocation:
    """One place a field is selected."""

    file_path: str
    line: int

    def to_dict(self) -> Dict:
        return {"filePath": self.file_path, "line": self.line}


# type name -> field name -> occurrences (insertion order, no dedup)
UsageMap = Dict[str, Dict[str, List[FieldUsageLocation]]]


def record_usage(usage_map: UsageMap, type_name: str, field_name: str, location: FieldUsageLocation):
    usage_map.setdefault(type_name, {}).setdefault(field_name, []).append(location)


class UsageBinder(Visitor):
    """Visitor that binds field selections to their parent schema types.

    Attributes:
        schema: The introspected schema.
        usage_map: Map the occurrences are appended to (shared across files).
        location: Location attached to every field found by this binder.
    """

    def __init__(self, schema: GraphQLSchema, usage_map: UsageMap, location: FieldUsageLocation):
        super().__init__()
        self.schema = schema
        self.usage_map = usage_map
        self.location = location
        self.recorded = 0
        self._type_stack = []
        self._pending = None

    # -- definitions ------------------------------------------------------

    def enter_operation_definition(self, node, *_args):
        self._pending = self._root_type(node.operation)

    def enter_fragment_definition(self, node, *_args):
        self._pending = self._named_type(node.type_condition.name.value)

    def enter_inline_fragment(self, node, *_args):
        if node.type_condition:
            self._pending = self._named_type(node.type_condition.name.value)
        else:
            self._pending = self._type_stack[-1] if self._type_stack else None

    # -- selections -------------------------------------------------------

    def enter_selection_set(self, *_args):
        self._type_stack.append(self._pending)
        self._pending = None

    def leave_selection_set(self, *_args):
        self._type_stack.pop()

    def enter_field(self, node, *_args):
        field_name = node.name.value
        parent_type = self._parent_type()

        if parent_type is None:
            self._pending = None
            return

        record_usage(self.usage_map, parent_type.name, field_name, self.location)
        self.recorded += 1

        field_def = self._field_def(parent_type, field_name)
        self._pending = get_named_type(field_def.type) if field_def else None

    # -- type resolution --------------------------------------------------

    def _parent_type(self):
        if not self._type_stack:
            return None
        current = self._type_stack[-1]
        return current if is_composite_type(current) else None

    def _root_type(self, operation: OperationType):
        if operation == OperationType.QUERY:
            return self.schema.query_type
        if operation == OperationType.MUTATION:
            return self.schema.mutation_type
        if operation == OperationType.SUBSCRIPTION:
            return self.schema.subscription_type
        return None

    def _named_type(self, name: str):
        return self.schema.get_type(name)

    def _field_def(self, parent_type, field_name: str):
        if field_name == "__typename":
            return TypeNameMetaFieldDef
        if parent_type is self.schema.query_type:
            if field_name == "__schema":
                return SchemaMetaFieldDef
            if field_name == "__type":
                return TypeMetaFieldDef
        if is_object_type(parent_type) or is_interface_type(parent_type):
            return parent_type.fields.get(field_name)
        return None


def bind_usages(
    schema: GraphQLSchema,
    document,
    usage_map: UsageMap,
    location: FieldUsageLocation,
) -> int:
    """Walk one parsed document and record its field usages.

    Returns:
        The number of occurrences recorded.
    """
    binder = UsageBinder(schema, usage_map, location)
    visit(document, binder)
    return binder.recorded
