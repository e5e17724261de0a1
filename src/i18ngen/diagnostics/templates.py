"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every diagnostic documented in one place and testable on its own.
    """

    # Template errors

    @staticmethod
    def duplicate_placeholder(name: str, count: int, message_id: str, locale: str) -> Diagnostic:
        """Unsuffixed placeholder occurs more than once in one template.

        Args:
            name: Placeholder base name
            count: Number of unsuffixed occurrences
            message_id: Message containing the template
            locale: Locale of the template

        Returns:
            Diagnostic for DUPLICATE_PLACEHOLDER
        """
        msg = f"Duplicate placeholder '{name}' found ({count} times)"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_PLACEHOLDER,
            message=msg,
            hint=(
                "Use suffix notation to distinguish multiple instances "
                f"(e.g., {{{{.{name}:from}}}} and {{{{.{name}:to}}}})"
            ),
            message_id=message_id,
            locale=locale,
            field_name=name,
        )

    @staticmethod
    def template_too_deep(depth: int, max_depth: int, message_id: str, locale: str) -> Diagnostic:
        """Brace nesting exceeds the safety bound.

        Args:
            depth: Measured nesting depth
            max_depth: Configured maximum
            message_id: Message containing the template
            locale: Locale of the template

        Returns:
            Diagnostic for TEMPLATE_TOO_DEEP
        """
        msg = f"Template is too complex: nesting depth {depth} exceeds maximum {max_depth}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_TOO_DEEP,
            message=msg,
            hint="Flatten nested braces; placeholders take the form {{.name}}",
            message_id=message_id,
            locale=locale,
        )

    @staticmethod
    def template_too_many_placeholders(
        count: int, max_count: int, message_id: str, locale: str
    ) -> Diagnostic:
        """Placeholder occurrences exceed the safety bound.

        Args:
            count: Number of "{{" openings
            max_count: Configured maximum
            message_id: Message containing the template
            locale: Locale of the template

        Returns:
            Diagnostic for TEMPLATE_TOO_MANY_PLACEHOLDERS
        """
        msg = f"Template is too complex: {count} placeholders exceed maximum {max_count}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_TOO_MANY_PLACEHOLDERS,
            message=msg,
            hint="Split the message into smaller messages",
            message_id=message_id,
            locale=locale,
        )

    @staticmethod
    def invalid_template_value(type_name: str, message_id: str, locale: str) -> Diagnostic:
        """Decoded template value has an unsupported shape.

        Args:
            type_name: Python type name of the decoded value
            message_id: Message holding the value
            locale: Locale key of the value

        Returns:
            Diagnostic for INVALID_TEMPLATE_VALUE
        """
        msg = f"Template value of type '{type_name}' is not a string or plural-category map"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TEMPLATE_VALUE,
            message=msg,
            hint="Write the template as a string, or as a map like {one: ..., other: ...}",
            message_id=message_id,
            locale=locale,
        )

    @staticmethod
    def invalid_plural_form(category: str, type_name: str, message_id: str, locale: str) -> Diagnostic:
        """Plural-category map holds a non-string key or value.

        Args:
            category: Offending category key (as text)
            type_name: Python type name of the offending key or value
            message_id: Message holding the map
            locale: Locale key of the map

        Returns:
            Diagnostic for INVALID_TEMPLATE_VALUE
        """
        msg = f"Plural form '{category}' has unsupported type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TEMPLATE_VALUE,
            message=msg,
            hint="Plural categories and their texts must both be strings",
            message_id=message_id,
            locale=locale,
            field_name=category,
        )

    @staticmethod
    def empty_plural_map(message_id: str, locale: str) -> Diagnostic:
        """Plural-category map has no forms.

        Args:
            message_id: Message holding the map
            locale: Locale key of the map

        Returns:
            Diagnostic for EMPTY_PLURAL_MAP
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_PLURAL_MAP,
            message="Plural-category map has no forms",
            hint="Provide at least an 'other' form",
            message_id=message_id,
            locale=locale,
        )

    # Identifier errors

    @staticmethod
    def invalid_identifier(
        what: str,
        name: str,
        *,
        message_id: str | None = None,
        locale: str | None = None,
        field_name: str | None = None,
        source_path: str | None = None,
    ) -> Diagnostic:
        """Name cannot become a generated identifier.

        Args:
            what: Role of the name ("placeholder kind", "placeholder item", ...)
            name: Offending name
            message_id: Message being processed, if any
            locale: Locale being processed, if any
            field_name: Authored name the offending name was derived from
            source_path: Source file, if known

        Returns:
            Diagnostic for INVALID_IDENTIFIER
        """
        msg = f"Invalid {what} name '{name}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_IDENTIFIER,
            message=msg,
            hint="Names must match ^[a-zA-Z_][a-zA-Z0-9_]*$",
            message_id=message_id,
            locale=locale,
            field_name=field_name or name,
            source_path=source_path,
        )

    # Model errors

    @staticmethod
    def duplicate_message_id(message_id: str) -> Diagnostic:
        """Message ID declared more than once.

        Args:
            message_id: The repeated message ID

        Returns:
            Diagnostic for DUPLICATE_MESSAGE_ID
        """
        msg = f"Message '{message_id}' is defined more than once"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_MESSAGE_ID,
            message=msg,
            hint="Message IDs must be unique across all message files",
            message_id=message_id,
        )

    @staticmethod
    def duplicate_placeholder_type(type_name: str, first: str, second: str) -> Diagnostic:
        """Two placeholder kinds derive the same generated type name.

        Args:
            type_name: Colliding generated type name
            first: Kind (or base name) that claimed the name first
            second: Kind (or base name) that collided

        Returns:
            Diagnostic for DUPLICATE_PLACEHOLDER_TYPE
        """
        msg = f"Placeholder type '{type_name}' is generated by both '{first}' and '{second}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_PLACEHOLDER_TYPE,
            message=msg,
            hint="Rename one of the placeholder kinds or fields",
            field_name=second,
        )

    @staticmethod
    def duplicate_field_name(field_name: str, first: str, second: str, message_id: str) -> Diagnostic:
        """Two distinct field references derive the same generated field.

        Args:
            field_name: Colliding generated field name
            first: Authored path that claimed the name first
            second: Authored path that collided
            message_id: Message holding both references

        Returns:
            Diagnostic for DUPLICATE_FIELD_NAME
        """
        msg = f"Placeholders '{first}' and '{second}' both generate field '{field_name}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_FIELD_NAME,
            message=msg,
            hint="Choose a different suffix for one of the placeholders",
            message_id=message_id,
            field_name=second,
        )

    @staticmethod
    def duplicate_struct_name(struct_name: str, first: str, second: str) -> Diagnostic:
        """Two definitions derive the same generated class name.

        Args:
            struct_name: Colliding generated class name
            first: Definition that claimed the name first
            second: Definition that collided

        Returns:
            Diagnostic for DUPLICATE_STRUCT_NAME
        """
        msg = f"Class '{struct_name}' is generated by both {first} and {second}"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_STRUCT_NAME,
            message=msg,
            hint="Rename the message ID or the placeholder kind",
            field_name=struct_name,
        )

    @staticmethod
    def duplicate_item_name(member_name: str, first: str, second: str, kind: str) -> Diagnostic:
        """Two items of one placeholder kind derive the same member name.

        Args:
            member_name: Colliding generated member name
            first: Item id that claimed the name first
            second: Item id that collided
            kind: Placeholder kind holding both items

        Returns:
            Diagnostic for DUPLICATE_ITEM_NAME
        """
        msg = f"Items '{first}' and '{second}' of '{kind}' both generate member '{member_name}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_ITEM_NAME,
            message=msg,
            hint="Rename one of the items",
            field_name=second,
        )

    # Source and configuration errors

    @staticmethod
    def source_not_found(what: str, pattern: str) -> Diagnostic:
        """Glob pattern matched no files.

        Args:
            what: Kind of source ("message", "placeholder")
            pattern: Glob pattern used

        Returns:
            Diagnostic for SOURCE_NOT_FOUND
        """
        msg = f"No {what} files found matching pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_NOT_FOUND,
            message=msg,
            hint="Verify the glob pattern matches your file structure",
            source_path=pattern,
        )

    @staticmethod
    def source_decode_failed(path: str, reason: str) -> Diagnostic:
        """Source file could not be read or decoded.

        Args:
            path: File path
            reason: Decoder error text

        Returns:
            Diagnostic for SOURCE_DECODE_FAILED
        """
        msg = f"Failed to decode '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_DECODE_FAILED,
            message=msg,
            hint="Check that the file is valid YAML or JSON",
            source_path=path,
        )

    @staticmethod
    def source_invalid_shape(path: str, expected: str) -> Diagnostic:
        """Decoded source file has an unexpected structure.

        Args:
            path: File path
            expected: Description of the expected shape

        Returns:
            Diagnostic for SOURCE_INVALID_SHAPE
        """
        msg = f"Unexpected structure in '{path}': expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_INVALID_SHAPE,
            message=msg,
            source_path=path,
        )

    @staticmethod
    def config_invalid(path: str, reason: str) -> Diagnostic:
        """Configuration file holds invalid data.

        Args:
            path: Configuration file path
            reason: What is wrong

        Returns:
            Diagnostic for CONFIG_INVALID
        """
        msg = f"Invalid configuration in '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_INVALID,
            message=msg,
            source_path=path,
        )

    # Generation errors

    @staticmethod
    def generated_code_invalid(path: str, reason: str) -> Diagnostic:
        """Rendered module failed to compile.

        Args:
            path: Target file name
            reason: Compiler error text

        Returns:
            Diagnostic for GENERATED_CODE_INVALID
        """
        msg = f"Generated code for '{path}' does not compile: {reason}"
        return Diagnostic(
            code=DiagnosticCode.GENERATED_CODE_INVALID,
            message=msg,
            hint="Check message IDs and placeholder names for unusual characters",
            source_path=path,
        )

    @staticmethod
    def output_write_failed(path: str, reason: str) -> Diagnostic:
        """Generated module could not be read back or written.

        Args:
            path: Target file path
            reason: OS error text

        Returns:
            Diagnostic for OUTPUT_WRITE_FAILED
        """
        msg = f"Cannot write generated module '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.OUTPUT_WRITE_FAILED,
            message=msg,
            hint="Check that output_dir is writable",
            source_path=path,
        )

    # Warnings

    @staticmethod
    def ambiguous_placeholder(name: str, chosen: str, others: tuple[str, ...]) -> Diagnostic:
        """Item id declared by several placeholder kinds.

        Args:
            name: Field base name being matched
            chosen: Kind the field was bound to
            others: Other kinds declaring the same item id

        Returns:
            Warning diagnostic for AMBIGUOUS_PLACEHOLDER
        """
        msg = (
            f"Placeholder '{name}' matches items in kinds {', '.join((chosen, *others))}; "
            f"using '{chosen}'"
        )
        return Diagnostic(
            code=DiagnosticCode.AMBIGUOUS_PLACEHOLDER,
            message=msg,
            hint="Reference the kind name directly to avoid ambiguity",
            field_name=name,
            severity="warning",
        )

    @staticmethod
    def unknown_plural_category(category: str, message_id: str, locale: str) -> Diagnostic:
        """Plural map key is not a CLDR category.

        Args:
            category: Offending key
            message_id: Message holding the map
            locale: Locale key of the map

        Returns:
            Warning diagnostic for UNKNOWN_PLURAL_CATEGORY
        """
        msg = f"Unknown plural category '{category}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PLURAL_CATEGORY,
            message=msg,
            hint="CLDR categories are zero, one, two, few, many, other",
            message_id=message_id,
            locale=locale,
            field_name=category,
            severity="warning",
        )

    @staticmethod
    def missing_plural_category(category: str, message_id: str, locale: str) -> Diagnostic:
        """Plural map lacks a category the locale's CLDR rules can select.

        Args:
            category: Missing category
            message_id: Message holding the map
            locale: Locale key of the map

        Returns:
            Warning diagnostic for MISSING_PLURAL_CATEGORY
        """
        msg = f"Plural form '{category}' is missing for locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_PLURAL_CATEGORY,
            message=msg,
            hint="Rendering falls back to the 'other' form",
            message_id=message_id,
            locale=locale,
            field_name=category,
            severity="warning",
        )

    @staticmethod
    def missing_translation(message_id: str, locale: str) -> Diagnostic:
        """Message has no template for a configured locale.

        Args:
            message_id: Message lacking the template
            locale: Configured locale without a template

        Returns:
            Warning diagnostic for MISSING_TRANSLATION
        """
        msg = f"Message '{message_id}' has no template for locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_TRANSLATION,
            message=msg,
            hint="Rendering falls back to the primary locale",
            message_id=message_id,
            locale=locale,
            severity="warning",
        )

    @staticmethod
    def stringified_template_value(type_name: str, message_id: str, locale: str) -> Diagnostic:
        """Scalar template value converted to text.

        Args:
            type_name: Python type name of the decoded value
            message_id: Message holding the value
            locale: Locale key of the value

        Returns:
            Warning diagnostic for STRINGIFIED_TEMPLATE_VALUE
        """
        msg = f"Template value of type '{type_name}' was converted to a string"
        return Diagnostic(
            code=DiagnosticCode.STRINGIFIED_TEMPLATE_VALUE,
            message=msg,
            hint="Quote the value in the source file",
            message_id=message_id,
            locale=locale,
            severity="warning",
        )

    @staticmethod
    def unknown_locale(locale: str) -> Diagnostic:
        """Configured locale is unknown to CLDR.

        Args:
            locale: Configured locale code

        Returns:
            Warning diagnostic for UNKNOWN_LOCALE
        """
        msg = f"Locale '{locale}' is not known to CLDR"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=msg,
            hint="Generated code selects the 'other' plural form for this locale",
            locale=locale,
            severity="warning",
        )
