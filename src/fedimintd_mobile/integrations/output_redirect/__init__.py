"""Process output redirection integration."""

from fedimintd_mobile.integrations.output_redirect.abc import OutputRedirect
from fedimintd_mobile.integrations.output_redirect.fake import FakeOutputRedirect

__all__ = ["FakeOutputRedirect", "OutputRedirect"]
