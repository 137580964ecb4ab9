"""
Forecast routes: linear trend regression over dated records with projection bands and target crossing estimates.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import datetime as dt

from fastapi import APIRouter

from api.requests import RegressionRequest
from api.responses import RegressionResponse
from api.routes.exception import handle_exceptions
from services.forecast_service import run_forecast

router = APIRouter(tags=["Forecast"])


@router.post(
    "/forecast/regression",
    summary="Linear trend, projection band and target dates for a dated series",
    response_model=RegressionResponse,
)
@handle_exceptions
async def trend_regression(req: RegressionRequest) -> RegressionResponse:
    # the engine never reads the clock; today is resolved here
    today = req.today or dt.date.today()
    return run_forecast(req, today)
