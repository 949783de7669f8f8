"""Identifiers of the syntax lint rules."""


class SyntaxRule:
    NAMESPACE_SEMICOLON = "namespace-semicolon"
    PREFIX_SEMICOLON = "prefix-semicolon"
    DESCRIPTION_SEMICOLON = "description-semicolon"
    TYPE_SEMICOLON = "type-semicolon"
    DESCRIPTION_QUOTES = "description-quotes"
    DOUBLE_SEMICOLON = "double-semicolon"
    MISPLACED_SEMICOLON = "misplaced-semicolon"
    MISSING_MODULE = "missing-module"
    UNBALANCED_BRACES = "unbalanced-braces"
    UNCLOSED_QUOTES = "unclosed-quotes"

    ALL = (
        NAMESPACE_SEMICOLON,
        PREFIX_SEMICOLON,
        DESCRIPTION_SEMICOLON,
        TYPE_SEMICOLON,
        DESCRIPTION_QUOTES,
        DOUBLE_SEMICOLON,
        MISPLACED_SEMICOLON,
        MISSING_MODULE,
        UNBALANCED_BRACES,
        UNCLOSED_QUOTES,
    )
