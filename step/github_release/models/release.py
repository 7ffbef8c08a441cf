"""
GitHub Release step: release record model.

The same record is built locally from the step inputs, sent to the
create-release endpoint, and then enriched in place with the API response
(id, upload_url, html_url).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Fields sent to POST /repos/{owner}/{repo}/releases.
REQUEST_FIELDS = ("tag_name", "name", "target_commitish", "body", "draft", "prerelease")


class ReleaseRecord(BaseModel):
    """
    A GitHub release, both as outgoing request and incoming response.

    id, upload_url and html_url stay empty until the API assigns them.
    """

    id: int | None = None
    tag_name: str = ""
    name: str = ""
    target_commitish: str = ""
    body: str = ""
    draft: bool = False
    prerelease: bool = False
    upload_url: str = ""
    html_url: str = Field(default="", description="Human-facing release page")

    def to_payload(self) -> dict[str, Any]:
        """JSON body for the create-release request, zero values omitted."""
        d = self.model_dump(include=set(REQUEST_FIELDS))
        return {key: d[key] for key in REQUEST_FIELDS if d[key]}

    def apply_response(self, data: dict[str, Any]) -> ReleaseRecord:
        """
        Overwrite the fields present in an API response, in place.

        Null values leave the local value unchanged and unknown keys are
        ignored.
        """
        known = {k: v for k, v in data.items() if k in type(self).model_fields and v is not None}
        update = type(self).model_validate(known)
        for field in update.model_fields_set:
            setattr(self, field, getattr(update, field))
        return self
