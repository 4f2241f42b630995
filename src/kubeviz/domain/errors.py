"""Exception hierarchy for kubeviz domain and infrastructure helpers.

Services translate these into ``ServiceResult`` errors; nothing above the
service layer should see them.
"""

from __future__ import annotations


class KubevizError(Exception):
    """Base class for all kubeviz errors."""


class ManifestParseError(KubevizError):
    """Input text is not valid YAML."""


class ManifestReadError(KubevizError):
    """A manifest source could not be read."""


class RenderError(KubevizError):
    """A renderer failed to produce output."""


class ShareEncodeError(KubevizError):
    """Manifest text could not be packed into a share token."""


class ShareDecodeError(KubevizError):
    """A share token or URL could not be unpacked."""


class ClipboardUnavailableError(KubevizError):
    """No clipboard backend accepted the text."""


class EmptyInputError(KubevizError):
    """No manifest text was supplied."""


class NoResourcesError(KubevizError):
    """The input parsed but held no recognizable Kubernetes objects."""


class UnknownFormatError(KubevizError):
    """No renderer is registered under the requested format name."""

    def __init__(self, fmt: str, valid: list[str]) -> None:
        super().__init__(f"Unknown output format: {fmt}")
        self.fmt = fmt
        self.valid = valid
