from __future__ import annotations

import os
from typing import Tuple

from dotenv import load_dotenv

from .client import DEFAULT_API_URL, GitHubClient

TOKEN_ENV = "GITHUB_PERSONAL_ACCESS_TOKEN"
API_URL_ENV = "GITHUB_API_URL"


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str]:
    """Load the GitHub API root and token from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    base_url = os.getenv(API_URL_ENV, "").strip() or DEFAULT_API_URL
    token = os.getenv(TOKEN_ENV, "").strip()
    return base_url, token


def create_client_from_env(**kwargs) -> GitHubClient:
    """Create a GitHubClient from environment variables."""
    base_url, token = load_env_config()
    if not token:
        raise ValueError(f"Missing {TOKEN_ENV} in environment.")
    return GitHubClient(base_url=base_url, token=token, **kwargs)


__all__ = ["load_env_config", "create_client_from_env", "TOKEN_ENV", "API_URL_ENV"]
