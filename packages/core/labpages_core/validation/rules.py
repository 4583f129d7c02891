"""Per-endpoint rule functions.

Each rule takes the parsed JSON object and appends human-readable messages
to ``errors`` and ``warnings``. Rules never raise on well-formed JSON and
report every violation they find rather than stopping at the first.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from labpages_core.schemas.validation import Endpoint

RuleFunction = Callable[[dict[str, Any], list[str], list[str]], None]

SEMVER_RE = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+$")
AMOUNT_RE = re.compile(r"^[0-9]+(\.[0-9]+)?$")

MANDATORY_COMPONENTS = ("accounts", "balances")
WILDCARD = "*"
ERC20_TYPE = "Erc20Token"
ACCOUNT_STATUSES = ("active", "suspended", "closed")
ASSET_REFERENCE_FIELDS = ("nationalCurrencyCode", "cryptocurrencySymbol", "assetId")


def _missing(value: Any) -> bool:
    """Absent, null, empty string and false all count as missing."""
    return value is None or value is False or value == ""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _items(
    response: dict[str, Any], field: str, label: str, errors: list[str]
) -> list[tuple[int, dict[str, Any]]]:
    """Return the indexed objects of a required array field.

    Missing or non-array fields and non-object elements are reported here.
    """
    value = response.get(field)
    if _missing(value):
        errors.append(f"Missing required field: {field}")
        return []
    if not isinstance(value, list):
        errors.append(f'Field "{field}" must be an array')
        return []

    items: list[tuple[int, dict[str, Any]]] = []
    for index, item in enumerate(value):
        if isinstance(item, dict):
            items.append((index, item))
        else:
            errors.append(f"{label} {index}: must be a JSON object")
    return items


def _require(
    item: dict[str, Any], fields: tuple[str, ...], prefix: str, errors: list[str]
) -> None:
    for field in fields:
        if _missing(item.get(field)):
            errors.append(f'{prefix}: Missing required "{field}" field')


def validate_capabilities(
    response: dict[str, Any], errors: list[str], warnings: list[str]
) -> None:
    """GET /capabilities: version plus a components map."""
    version = response.get("version")
    if _missing(version):
        errors.append("Missing required field: version")
    elif not isinstance(version, str) or not SEMVER_RE.match(version):
        warnings.append('Version should follow semantic versioning (e.g., "1.0.37")')

    components = response.get("components")
    if _missing(components):
        errors.append("Missing required field: components")
        return
    if not isinstance(components, dict):
        errors.append('Field "components" must be an object')
        return

    for name in MANDATORY_COMPONENTS:
        if _missing(components.get(name)):
            errors.append(f'Capabilities must always include "{name}" component')

    for key, value in components.items():
        if value != WILDCARD and not isinstance(value, list):
            errors.append(f'Component "{key}" must be either "*" or an array of account IDs')


def validate_assets(
    response: dict[str, Any], errors: list[str], warnings: list[str]
) -> None:
    """GET /capabilities/assets: additional asset definitions."""
    for index, asset in _items(response, "assets", "Asset", errors):
        prefix = f"Asset {index}"
        _require(asset, ("id", "type", "name", "symbol"), prefix, errors)
        if not _is_number(asset.get("decimalPlaces")):
            errors.append(f'{prefix}: "decimalPlaces" must be a number')
        if asset.get("type") == ERC20_TYPE and _missing(asset.get("contractAddress")):
            errors.append(f'{prefix}: ERC-20 tokens require "contractAddress" field')


def validate_accounts(
    response: dict[str, Any], errors: list[str], warnings: list[str]
) -> None:
    """GET /accounts: sub-accounts with a known status."""
    for index, account in _items(response, "accounts", "Account", errors):
        prefix = f"Account {index}"
        _require(account, ("id", "title", "status"), prefix, errors)
        status = account.get("status")
        if not _missing(status) and status not in ACCOUNT_STATUSES:
            errors.append(f'{prefix}: Status must be "active", "suspended", or "closed"')


def validate_balances(
    response: dict[str, Any], errors: list[str], warnings: list[str]
) -> None:
    """GET /accounts/{accountId}/balances: amounts keyed to one asset reference."""
    for index, balance in _items(response, "balances", "Balance", errors):
        prefix = f"Balance {index}"
        _require(balance, ("id", "asset", "availableAmount"), prefix, errors)

        amount = balance.get("availableAmount")
        if not _missing(amount) and not (isinstance(amount, str) and AMOUNT_RE.match(amount)):
            errors.append(f'{prefix}: "availableAmount" must be a positive number string')

        asset = balance.get("asset")
        if _missing(asset):
            continue
        if not isinstance(asset, dict):
            errors.append(f'{prefix}: "asset" must be an object')
            continue
        references = sum(1 for field in ASSET_REFERENCE_FIELDS if not _missing(asset.get(field)))
        if references != 1:
            errors.append(
                f"{prefix}: Asset must have exactly one of "
                "nationalCurrencyCode, cryptocurrencySymbol, or assetId"
            )


RULES: dict[Endpoint, RuleFunction] = {
    Endpoint.CAPABILITIES: validate_capabilities,
    Endpoint.ASSETS: validate_assets,
    Endpoint.ACCOUNTS: validate_accounts,
    Endpoint.BALANCES: validate_balances,
}
