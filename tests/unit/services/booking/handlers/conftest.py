import json
from dataclasses import dataclass

import pytest


@dataclass
class FakeLambdaContext:
    function_name: str = "booking-finance"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:us-west-2:123456789012:function:booking-finance"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    function_version: str = "$LATEST"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway HTTP API (v2) イベントを生成する Factory fixture"""

    def _factory(body: object = None, raw_body: str | None = None) -> dict:
        event = {
            "version": "2.0",
            "routeKey": "POST /bookings",
            "rawPath": "/bookings",
            "headers": {"content-type": "application/json"},
            "isBase64Encoded": False,
        }
        if raw_body is not None:
            event["body"] = raw_body
        elif body is not None:
            event["body"] = json.dumps(body)
        return event

    return _factory
