"""
Exception types for the campaign workflow

Adapter errors are fatal to a run. Malformed model output is never raised;
nodes recover from it locally (see utils/parsing.py).
"""

from typing import Optional


class CampaignError(Exception):
    """Base class for all campaign generation errors"""


class ConfigurationError(CampaignError):
    """A required setting (API key, model name) is missing or invalid"""


class AdapterError(CampaignError):
    """An external collaborator (completion or search service) failed"""

    retryable = False


class CompletionServiceError(AdapterError):
    """The language model endpoint returned an error (network, auth, quota)"""


class CompletionTimeoutError(CompletionServiceError):
    """The language model endpoint did not answer in time"""

    retryable = True


class MarketResearchError(AdapterError):
    """The web search service returned an error"""


class MarketResearchTimeoutError(MarketResearchError):
    """The web search service did not answer in time"""

    retryable = True


class WorkflowError(CampaignError):
    """
    Raised by the engine when a run cannot complete.

    Attributes:
        run_id: Identifier of the failed run
        node: Node that was executing when the run failed, if known
        retryable: True when the caller may retry the same request (timeouts)
    """

    def __init__(self, message: str, run_id: str, node: Optional[str] = None, retryable: bool = False):
        super().__init__(message)
        self.run_id = run_id
        self.node = node
        self.retryable = retryable

    def __str__(self):
        where = f" at node '{self.node}'" if self.node else ""
        return f"Run {self.run_id} failed{where}: {self.args[0]}"
