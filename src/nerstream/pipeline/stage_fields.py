"""Field Extraction Stage - Split data lines into token and NE tag."""

from nerstream.errors import StructuralFormatError
from nerstream.models import LanguageProfile


FIELD_SEPARATOR = " "


class FieldExtractor:
    """Validates the column count of a data line and picks the used columns.

    Only the token and the NE tag are kept; the PoS and story columns are
    dropped.
    """

    def __init__(self, profile: LanguageProfile):
        self.profile = profile

    def extract(self, line: str) -> tuple[str, str]:
        """Return ``(token, ne_tag)`` for a data line.

        Raises:
            StructuralFormatError: If the line does not split into exactly
                ``profile.field_count`` fields, or a field is empty.
        """
        fields = line.split(FIELD_SEPARATOR)

        if len(fields) != self.profile.field_count:
            raise StructuralFormatError(
                f"Incorrect number of fields per line for language "
                f"'{self.profile.language.value}' (expected {self.profile.field_count}, "
                f"got {len(fields)})",
                line,
            )

        # Three spaces split into four empty fields
        if "" in fields:
            raise StructuralFormatError("Empty field in line", line)

        return fields[self.profile.token_column], fields[self.profile.tag_column]
