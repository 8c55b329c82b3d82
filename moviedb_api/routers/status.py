"""
Data load status endpoints.
"""

from fastapi import APIRouter, Depends, Request

from moviedb.config import Config
from moviedb.envelope import create_error_response, create_success_response
from moviedb.exceptions import BadRequestError, DataLoadError, ServiceUnavailableError
from moviedb.loader import DataLoader
from moviedb.store import RecordStore
from moviedb_api.dependencies import get_config, get_loader, get_store
from moviedb_api.exceptions import envelope_response
from moviedb_api.logging_config import logger
from moviedb_api.schemas.common import error_responses
from moviedb_api.schemas.status import LoadStatusResponse

router = APIRouter()


def _status_payload(store: RecordStore, config: Config) -> dict:
    return {
        "data_mode": config.data_mode,
        "ready": store.is_ready,
        "statuses": store.statuses(),
        "errors": store.errors(),
        "counts": store.counts(),
    }


@router.get("/status", responses={200: {"model": LoadStatusResponse}})
async def get_status(
    store: RecordStore = Depends(get_store),
    config: Config = Depends(get_config),
):
    """
    Per-collection load status (pending, loading, loaded, failed).
    """
    return envelope_response(create_success_response({"data": _status_payload(store, config)}))


@router.post(
    "/status/retry",
    responses={200: {"model": LoadStatusResponse}, **error_responses(400, 503)},
)
async def retry_load(
    request: Request,
    config: Config = Depends(get_config),
    loader: DataLoader = Depends(get_loader),
):
    """
    Re-run all three collection fetches (files mode only).

    Refused with 503 while the startup load or another retry is running.
    """
    if not config.uses_loader:
        raise BadRequestError("Data mode is static; there is nothing to reload")

    startup_task = getattr(request.app.state, "load_task", None)
    if loader.in_progress or (startup_task is not None and not startup_task.done()):
        raise ServiceUnavailableError("Data load already in progress")

    try:
        await loader.retry()
    except DataLoadError as e:
        logger.error(f"Retry failed: {e.errors}")
        return envelope_response(create_error_response(503, str(e)))

    return envelope_response(
        create_success_response({"data": _status_payload(loader.store, config)})
    )
