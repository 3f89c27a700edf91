"""Error hierarchy for document parsing, collection building and site output"""


class SiteError(Exception):
    """Base class for every error raised while building a site."""


class DateFormatError(SiteError, ValueError):
    """Text does not match the fixed 'Mon DD, YYYY' date pattern."""

    def __init__(self, text: str, reason: str = "expected 'Mon DD, YYYY'"):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid date {text!r}: {reason}")


class MetadataError(SiteError):
    """A content file's header block could not be turned into metadata."""

    def __init__(self, message: str, source_path: str):
        self.source_path = source_path
        super().__init__(message)


class MissingFieldError(MetadataError):
    def __init__(self, key: str, source_path: str):
        self.key = key
        super().__init__(f"missing required field '{key}'", source_path)


class MalformedLineError(MetadataError):
    def __init__(self, line: str, source_path: str):
        self.line = line
        super().__init__(f"header line needs an equal sign: {line!r}", source_path)


class InvalidCreatedDate(MetadataError):
    def __init__(self, text: str, source_path: str):
        self.text = text
        super().__init__(f"can't parse created_date {text!r}", source_path)


class InvalidModifiedDate(MetadataError):
    def __init__(self, text: str, source_path: str):
        self.text = text
        super().__init__(f"can't parse modified_date {text!r}", source_path)


class DocumentError(SiteError):
    """Any failure while reading one content file, tagged with its path."""

    def __init__(self, source_path: str, cause: Exception):
        self.source_path = source_path
        self.cause = cause
        super().__init__(f"Failed to parse post at {source_path}: {cause}")


class DuplicateSlug(SiteError):
    def __init__(self, slug: str, first_path: str, second_path: str):
        self.slug = slug
        self.first_path = first_path
        self.second_path = second_path
        super().__init__(f"Duplicate post slug {slug!r}: {first_path} and {second_path}")


class TemplateMissing(SiteError):
    def __init__(self, name: str, templates_dir: str):
        self.name = name
        super().__init__(f"Missing template {name} in {templates_dir}")


class UnsafeOutputPath(SiteError):
    """A slug or tag would place a generated page outside its output directory."""

    def __init__(self, kind: str, name: str, source_path: str):
        self.kind = kind
        self.name = name
        self.source_path = source_path
        super().__init__(f"{source_path}: {kind} {name!r} is not a single path segment")
