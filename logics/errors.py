class SourceError(ValueError):
    """Base class for problems with an uploaded file. The message is shown to the user."""

    default_message = "Error reading file. Please check file format and try again."

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class EmptySource(SourceError):
    default_message = "File appears to be empty. Please upload a file with data."


class UnreadableFormat(SourceError):
    default_message = "Error reading file. Please check file format and try again."


class TooLarge(SourceError):
    default_message = "File size exceeds 10 MB limit. Please upload a smaller file."


class UnsupportedExtension(SourceError):
    default_message = "Only CSV and XLSX files are supported."


class NoSheetsFound(SourceError):
    default_message = "Excel file contains no sheets."


class SheetSelectionRequired(SourceError):
    """Raised when a workbook has several sheets and none was chosen."""

    default_message = "This Excel file contains multiple sheets. Please select one to continue."

    def __init__(self, sheet_names, message=None):
        super().__init__(message)
        self.sheet_names = list(sheet_names)


class PartitionError(KeyError):
    """Illegal partition edit; indicates a caller bug rather than a user error."""

    def __str__(self):
        return str(self.args[0]) if self.args else ''


class LabelNotFound(PartitionError):
    def __init__(self, label, side):
        super().__init__(f"Column '{label}' is not in the {side} list.")
        self.label = label
        self.side = side
