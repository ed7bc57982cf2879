"""Node kinds for sassreduce syntax trees.

Kind values are the type strings emitted by the gonzales-pe parser, so a
tree decoded from parser JSON maps one-to-one onto `NodeKind` members.
Type strings outside this vocabulary decode as `NodeKind.OTHER`; the node
keeps its original type string and is rendered bare and its children are walked with no special handling.
"""

from __future__ import annotations

from enum import Enum


class NodeKind(Enum):
    """Syntax node kinds, plus `OTHER` for types the parser adds later."""

    # Kinds the reducer dispatches on
    STYLESHEET = "stylesheet"
    BLOCK = "block"
    DECLARATION = "declaration"
    DECLARATION_DELIMITER = "declarationDelimiter"
    PROPERTY_DELIMITER = "propertyDelimiter"
    EXTEND = "extend"
    FUNCTION = "function"
    IDENTIFIER = "ident"
    INCLUDE = "include"
    INTERPOLATION = "interpolation"
    LOOP = "loop"
    MIXIN = "mixin"
    PARENTHESIS = "parentheses"
    PROPERTY = "property"
    RULESET = "ruleset"
    SELECTOR = "selector"
    SIMPLE_SELECTOR = "simpleSelector"
    VALUE = "value"
    VARIABLE = "variable"
    COMMENT = "multilineComment"

    # Opaque kinds (rendered, never inspected)
    ARGUMENTS = "arguments"
    ATKEYWORD = "atkeyword"
    ATRULE = "atrule"
    ATRULER = "atruler"
    ATRULES = "atrules"
    ATRULERQ = "atrulerq"
    ATRULERS = "atrulers"
    ATRULEB = "atruleb"
    ATTRIBUTE_FLAGS = "attributeFlags"
    ATTRIBUTE_MATCH = "attributeMatch"
    ATTRIBUTE_NAME = "attributeName"
    ATTRIBUTE_SELECTOR = "attributeSelector"
    ATTRIBUTE_VALUE = "attributeValue"
    BRACKETS = "brackets"
    CLASS = "class"
    COLOR = "color"
    COMBINATOR = "combinator"
    CONDITION = "condition"
    CONDITIONAL_STATEMENT = "conditionalStatement"
    CUSTOM_PROPERTY = "customProperty"
    DEFAULT = "default"
    DELIMITER = "delimiter"
    DIMENSION = "dimension"
    ESCAPED_STRING = "escapedString"
    EXPRESSION = "expression"
    GLOBAL = "global"
    ID = "id"
    IMPORTANT = "important"
    INTERPOLATED_VARIABLE = "interpolatedVariable"
    KEYFRAMES_SELECTOR = "keyframesSelector"
    NAME_PREFIX = "namePrefix"
    NAMESPACE_PREFIX = "namespacePrefix"
    NAMESPACE_SEPARATOR = "namespaceSeparator"
    NTH = "nth"
    NTH_SELECTOR = "nthSelector"
    NUMBER = "number"
    OPERATOR = "operator"
    OPTIONAL = "optional"
    PARENT_SELECTOR = "parentSelector"
    PARENT_SELECTOR_EXTENSION = "parentSelectorExtension"
    PERCENTAGE = "percentage"
    PLACEHOLDER = "placeholder"
    PROGID = "progid"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"
    RAW = "raw"
    SINGLELINE_COMMENT = "singlelineComment"
    SPACE = "space"
    STRING = "string"
    TYPE_SELECTOR = "typeSelector"
    UNICODE_RANGE = "unicodeRange"
    UNIVERSAL_SELECTOR = "universalSelector"
    URANGE = "urange"
    URI = "uri"
    VARIABLES_LIST = "variablesList"

    # Any type string not listed above
    OTHER = "other"

    @classmethod
    def from_type(cls, type_name: str) -> NodeKind:
        """Kind for a parser type string; unlisted types map to `OTHER`."""
        try:
            return cls(type_name)
        except ValueError:
            return cls.OTHER

    @property
    def is_removable(self) -> bool:
        return self in REMOVABLE_KINDS

    @property
    def is_read_context(self) -> bool:
        return self in READ_CONTEXT_KINDS


# Kinds replaced by a comment when nothing below them is kept
REMOVABLE_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.DECLARATION,
        NodeKind.EXTEND,
        NodeKind.INCLUDE,
        NodeKind.LOOP,
        NodeKind.MIXIN,
        NodeKind.RULESET,
    }
)

# Parent kinds under which a variable is being read rather than assigned
READ_CONTEXT_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.VALUE,
        NodeKind.INTERPOLATION,
        NodeKind.PARENTHESIS,
        NodeKind.LOOP,
    }
)
