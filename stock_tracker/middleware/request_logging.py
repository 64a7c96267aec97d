import time
import logging
from fastapi import Request

logger = logging.getLogger("access")

PROCESS_TIME_HEADER = "X-Process-Time-Ms"


async def request_logging_middleware(request: Request, call_next):
    start_time = time.perf_counter()

    response = await call_next(request)

    process_time = round((time.perf_counter() - start_time) * 1000, 2)
    response.headers[PROCESS_TIME_HEADER] = str(process_time)

    # store failures surface as 5xx; keep them visible above INFO
    level = logging.WARNING if response.status_code >= 500 else logging.INFO
    logger.log(
        level,
        "",
        extra={
            "client_addr": request.client.host if request.client else "unknown",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "process_time_ms": process_time,
        },
    )

    return response
