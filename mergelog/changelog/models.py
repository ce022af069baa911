"""Changelog data types."""

from pydantic import BaseModel, ConfigDict


class MergeInfo(BaseModel):
    """One merged pull request as it appears in the changelog."""

    model_config = ConfigDict(frozen=True)

    commit_hash: str = ""
    user_name: str = ""
    user_profile_url: str = ""
    merge_num: int = 0
    merge_url: str = ""
    title: str = ""
