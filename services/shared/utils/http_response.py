import json

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from pydantic import ValidationError

from services.shared.domain import ComputationFailureException, InvalidArgumentException


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def parse_json_body(event: APIGatewayProxyEventV2) -> dict:
    """リクエストボディを JSON オブジェクトとして取り出す"""
    raw = event.decoded_body if event.body else None
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidArgumentException("body", "must be valid JSON") from e
    if not isinstance(body, dict):
        raise InvalidArgumentException("body", "must be a JSON object")
    return body


def error_response(error: Exception) -> dict:
    """既知の例外を API レスポンスに変換する（未知の例外は 500）"""
    if isinstance(error, ValidationError):
        return api_response(
            400,
            {
                "message": "Invalid request",
                "errors": error.errors(include_url=False, include_context=False),
            },
        )
    if isinstance(error, InvalidArgumentException):
        return api_response(400, {"message": str(error), "argument": error.argument})
    if isinstance(error, ComputationFailureException):
        return api_response(422, {"message": str(error)})
    return api_response(500, {"message": "Internal server error"})
