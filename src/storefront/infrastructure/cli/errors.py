"""Mapping of domain and API errors onto click's error reporting."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.api.errors import ApiError, UnauthorizedError

HANDLED = (DomainException, ApiError)


def to_click(exc: Exception) -> click.ClickException:
    if isinstance(exc, UnauthorizedError):
        return click.ClickException(
            f"{exc.message}. You have been signed out; "
            "run 'storefront auth login' to continue."
        )
    return click.ClickException(str(exc))
