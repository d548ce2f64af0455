"""Access Control bulk job operations.

A job applies role assignments, unassignments and member removals for many
users in one asynchronous server-side operation.
"""
from __future__ import annotations
from typing import Dict

from .client import BaseClient
from .exceptions import InvalidRequestError
from .models import RESULT_MODES, APIResponse, ITwinJob, ITwinJobActions, ResultMode


class ITwinJobsClient:
    """Client for iTwin jobs."""

    def __init__(self, client: BaseClient):
        self.client = client

    def _jobs_url(self, itwin_id: str) -> str:
        return f"{self.client.base_url}/{itwin_id}/jobs"

    def create_itwin_job(self, access_token: str, itwin_id: str, actions: ITwinJobActions) -> APIResponse[ITwinJob]:
        """Start a job.

        Args:
            access_token: Caller access token
            itwin_id: iTwin ID
            actions: ``assignRoles``, ``unassignRoles`` and/or ``removeMembers`` lists

        Returns:
            APIResponse with status 201 and the job (initially ``Active``)
        """
        return self.client.send_request(
            access_token,
            "POST",
            self._jobs_url(itwin_id),
            {"actions": actions},
            extract=lambda payload: payload.get("job"),
        )

    def get_itwin_job(
        self,
        access_token: str,
        itwin_id: str,
        job_id: str,
        result_mode: ResultMode = "minimal",
    ) -> APIResponse[ITwinJob]:
        """Retrieve a job.

        With ``result_mode="representation"`` the job carries an ``error`` list
        describing the actions that failed; ``minimal`` omits it.

        Raises:
            InvalidRequestError: If ``result_mode`` is not a known mode
        """
        url = f"{self._jobs_url(itwin_id)}/{job_id}"
        return self.client.send_request(
            access_token,
            "GET",
            url,
            extract=lambda payload: payload.get("job"),
            headers=self.result_mode_headers(result_mode),
        )

    def get_itwin_job_actions(self, access_token: str, itwin_id: str, job_id: str) -> APIResponse[ITwinJobActions]:
        url = f"{self._jobs_url(itwin_id)}/{job_id}/actions"
        return self.client.send_request(access_token, "GET", url, extract=lambda payload: payload.get("actions"))

    @staticmethod
    def result_mode_headers(result_mode: ResultMode = "minimal") -> Dict[str, str]:
        if result_mode not in RESULT_MODES:
            raise InvalidRequestError(f"Unknown result mode {result_mode!r}; expected one of {RESULT_MODES}")
        return {"prefer": f"return={result_mode}"}
