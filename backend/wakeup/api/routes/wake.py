"""Wake-on-LAN route."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from wakeup.api.deps import get_dispatcher, http_error
from wakeup.errors import WakeError
from wakeup.schemas.wake import WakeRequest, WakeResult
from wakeup.services.dispatcher import Dispatcher

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/wake", response_model=WakeResult)
def wake(request: WakeRequest, dispatcher: Dispatcher = Depends(get_dispatcher)):
    """Send one magic packet per hardware address of the target.

    Sync handler: FastAPI runs it in the threadpool, so the blocking socket
    calls stay off the event loop.
    """
    try:
        return dispatcher.wake(request)
    except WakeError as e:
        logger.error("Wake failed: %s", e)
        raise http_error(e)
