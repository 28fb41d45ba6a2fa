"""
SyndromeDx — Inference Routes

Endpoint виводу синдромів за нормалізованими симптомами.
"""

import time
from fastapi import APIRouter, Depends

from syndrome_dx.audit import RunLogger
from syndrome_dx.inference_engine import InferencePipeline
from syndrome_dx.schemas import CaseRecord

from ..dependencies import get_pipeline, get_run_logger
from ..models import InferRequest, InferResponse, ErrorResponse

router = APIRouter(tags=["Inference"])


@router.post(
    "/infer",
    response_model=InferResponse,
    responses={502: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
def infer_case(
    request: InferRequest,
    pipeline: InferencePipeline = Depends(get_pipeline),
    run_logger: RunLogger = Depends(get_run_logger)
) -> InferResponse:
    """
    Вивід синдромів для одного випадку.

    Порожній список симптомів або відсутність збігів — успішна
    відповідь з best=null та уточнюючим питанням.

    Приклад:
    ```json
    {
        "encounter_id": "enc-001",
        "symptom_ids": ["cold-limbs", "pale-tongue"],
        "meta": {"age": 54}
    }
    ```
    """
    start_time = time.time()

    case = CaseRecord(
        symptom_ids=request.symptom_ids,
        encounter_id=request.encounter_id,
        meta=request.meta,
    )

    # DataAccessError обробляється глобальним handler-ом (502)
    result = pipeline.infer(case)

    run_logger.log(case, result)

    elapsed_ms = (time.time() - start_time) * 1000

    return InferResponse.from_result(result, processing_time_ms=elapsed_ms)
