from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications import QuoteCancellationService
from services.booking.handlers.request_models import CancellationQuoteRequest
from services.booking.handlers.response_models import cancellation_quote_response
from services.booking.handlers.settings import load_finance_policy
from services.shared.domain import DomainException
from services.shared.utils import api_response, error_response, parse_json_body

logger = Logger()

service = QuoteCancellationService(policy=load_finance_policy())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """キャンセル見積もり Lambda Handler

    キャンセル可否と返金額を返す。返金・予約ステータスの更新は行わない。
    """
    logger.info("Received cancellation quote request")

    try:
        request = CancellationQuoteRequest.model_validate(parse_json_body(event))
        logger.append_keys(booking_id=request.booking.get("id"))
        quote = service.quote(
            booking=request.booking,
            cancelled_at=request.cancelled_at,
            policy_type=request.cancellation_policy,
        )
    except (ValidationError, DomainException) as e:
        logger.warning("Rejected cancellation quote request", extra={"error": str(e)})
        return error_response(e)
    except Exception:
        logger.exception("Failed to quote cancellation")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, cancellation_quote_response(quote))
