from fastapi import APIRouter, Depends

from home_inventory.api.dependencies import get_session
from home_inventory.session import InventorySession

router = APIRouter(prefix="/api/insights", tags=["insights"])


@router.get("")
def insights_report(session: InventorySession = Depends(get_session)):
    return session.insights.report()


@router.get("/recommendations")
def recommendations(session: InventorySession = Depends(get_session)):
    recs = session.insights.recommendations()
    return {"recommendations": [r.to_dict() for r in recs], "count": len(recs)}


@router.get("/stats")
def stats(session: InventorySession = Depends(get_session)):
    return session.insights.stats().to_dict()
