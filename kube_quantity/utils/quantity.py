import decimal
from typing import Dict, Optional, overload

from lightkube.models import core_v1

from ..config import exact_context
from ..core.quantity import ParsedQuantity
from ..types import Quantity

ResourceRequirements = core_v1.ResourceRequirements

MILLI = decimal.Decimal("0.001")


def parse_quantity(quantity: Optional[str]) -> Optional[decimal.Decimal]:
    """Turn a quantity string into the plain decimal the API server would store for it.

    The exact value is rounded up to a multiple of 0.001, so `"0.9Gi"` gives `966367641.6` and
    `"250u"` gives `0.001`. Handy when a value read back from the cluster has to be matched
    against what was submitted, e.g. container limits after a rollout.

    **Parameters**

    * **quantity** `str` - Quantity text such as `"1Gi"`, `"500m"` or `"12e6"`. `None` is passed through.

    **returns**  A `decimal.Decimal` without suffix, or `None`.
    """
    if quantity is None:
        return None

    value = ParsedQuantity.parse(quantity).to_decimal()
    ctx = exact_context()
    ctx.traps[decimal.Inexact] = False
    try:
        return value.quantize(MILLI, rounding=decimal.ROUND_UP, context=ctx)
    except ArithmeticError as e:
        raise ValueError("Invalid numerical value") from e


RESOURCE_FIELDS = ("limits", "requests")


def _same_amounts(first: Optional[dict], second: Optional[dict]) -> bool:
    """Check that two resource dicts name the same resources with the same milli-rounded amounts."""
    first, second = first or {}, second or {}
    if first.keys() != second.keys():
        return False
    return all(parse_quantity(first[name]) == parse_quantity(second[name]) for name in first)


@overload
def equals_canonically(first: ResourceRequirements, second: ResourceRequirements) -> bool:
    ...


@overload
def equals_canonically(first: Optional[dict], second: Optional[dict]) -> bool:
    ...


def equals_canonically(first, second):
    """Tell whether two sets of resource amounts are the same once canonicalized.

    Amounts are compared the way the API server stores them, after `parse_quantity`, so
    `"0.5"` matches `"500m"` and `"1Gi"` matches `"1073741824"`. A missing dict and an empty
    dict are the same thing.

    ```python
    >>> equals_canonically({"memory": "1Gi"}, {"memory": "1024Mi"})
    True

    >>> equals_canonically(
            ResourceRequirements(requests={"cpu": "1"}),
            ResourceRequirements(limits={"cpu": "1"})
        )
    False
    ```

    **Parameters**

    * **first** `ResourceRequirements` or `dict` - Left side. A `dict` stands for one of `limits` or `requests`.
    * **second** `ResourceRequirements` or `dict` - Right side, of the same kind as `first`.

    **returns**  True when every resource (in both `limits` and `requests` for `ResourceRequirements`)
    has the same amount on both sides.
    """
    if isinstance(first, ResourceRequirements) and isinstance(second, ResourceRequirements):
        return all(_same_amounts(getattr(first, field), getattr(second, field)) for field in RESOURCE_FIELDS)
    if isinstance(first, ResourceRequirements) or isinstance(second, ResourceRequirements):
        raise TypeError("cannot compare resources of {} with {}".format(
            type(first).__name__, type(second).__name__))
    if not isinstance(first, (dict, type(None))) or not isinstance(second, (dict, type(None))):
        raise TypeError("expected resource dicts or ResourceRequirements, got {} and {}".format(
            type(first).__name__, type(second).__name__))
    return _same_amounts(first, second)


def sum_resources(*resources: Optional[dict]) -> Dict[str, Quantity]:
    """Add up resource dicts such as 'limits' or 'requests', key by key.

    The first dict where a key appears decides the suffix of the total.

    ```python
    >>> sum_resources({"cpu": "500m", "memory": "1Gi"}, {"cpu": "1", "memory": "512Mi"}, None)
    {'cpu': '1500m', 'memory': '1536Mi'}
    ```

    **Parameters**

    * **resources** `dict` - Any number of dicts mapping resource names to quantities. `None` is skipped.

    **returns**  A dict mapping each resource name to the total quantity.
    """
    totals = {}
    for resource in resources:
        if not resource:
            continue
        for name, quantity in resource.items():
            if name in totals:
                totals[name] = totals[name] + quantity
            else:
                totals[name] = ParsedQuantity.parse(quantity)
    return {name: total.to_quantity() for name, total in totals.items()}
