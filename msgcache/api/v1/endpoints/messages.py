"""Message endpoints: guarded resolution, customization and batch decisions.

Every path below /messages other than POST /messages/decisions names a
message key, so any key (including "stats" or "decisions") can be read and
customized. Lookup counters live at /api/v1/stats.
"""

from fastapi import APIRouter

from msgcache.api.v1.dependencies import LocaleDep, LookupServiceDep, TenantDep
from msgcache.application.use_cases.message_lookup import normalize_message_key
from msgcache.domain.exceptions import MessageNotFoundException
from msgcache.schemas.message import (
    DecisionRequest,
    DecisionResponse,
    KeyDecision,
    MessageCustomizeRequest,
    MessageCustomizeResponse,
    MessageResponse,
)

router = APIRouter()


@router.post("/decisions", response_model=DecisionResponse)
def decide_keys(
    body: DecisionRequest, lookup_service: LookupServiceDep, locale: LocaleDep
) -> DecisionResponse:
    """Return the short-circuit decision for each key, in request order.

    A query only: the keys are not recorded as skipped messages.
    """
    decisions = []
    for key in body.keys:
        decision = lookup_service.classify(key, locale=locale)
        decisions.append(
            KeyDecision(key=key, decision=decision, short_circuit=decision.short_circuits)
        )
    return DecisionResponse(locale=locale, decisions=decisions)


@router.get("/{key:path}", response_model=MessageResponse)
async def get_message(
    key: str, lookup_service: LookupServiceDep, tenant_id: TenantDep, locale: LocaleDep
) -> MessageResponse:
    """Resolve a message key for the current tenant and locale.

    Keys reported as nonexistent return 404 without touching the message store.
    """
    result = await lookup_service.get_message(key, tenant_id=tenant_id, locale=locale)
    if result.text is None:
        raise MessageNotFoundException(
            result.key, short_circuited=result.decision.short_circuits
        )
    return MessageResponse(
        key=result.key,
        locale=locale,
        text=result.text,
        decision=result.decision,
        source=result.source or "catalog",
    )


@router.put("/{key:path}", response_model=MessageCustomizeResponse)
async def customize_message(
    key: str,
    body: MessageCustomizeRequest,
    lookup_service: LookupServiceDep,
    tenant_id: TenantDep,
    locale: LocaleDep,
) -> MessageCustomizeResponse:
    """Store a tenant customization. Non-customizable (short-circuited) keys return 400."""
    stored = await lookup_service.customize_message(
        key, body.text, tenant_id=tenant_id, locale=locale
    )
    return MessageCustomizeResponse(key=normalize_message_key(key), stored=stored)
