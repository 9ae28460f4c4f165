from fastapi import APIRouter, Depends

from ..deps import get_store
from ..errors import QueryFailedError
from ..services.store import RecipeStore

router = APIRouter()


@router.get("/ready")
def ready(store: RecipeStore = Depends(get_store)):
    db_ok = False
    try:
        db_ok = store.ping()
    except QueryFailedError:
        pass
    return {"ok": True, "db_ok": db_ok}
