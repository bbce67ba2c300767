"""Stock management API endpoints."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, Response, status

from ....application.dtos.stock_dtos import CreateStockRequest, GetStocksRequest, UpdateStockRequest
from ....application.interfaces.stock_usecase_interface import StockUseCaseInterface
from ....core.config.config import Settings
from ....core.dependencies import StoreContext, get_settings, get_stock_use_case, get_store_context
from ....infrastructure.logging.structured_logger import get_logger
from ...formatters.csv_export import CSV_MEDIA_TYPE, build_csv_filename, write_stocks_csv
from ...schemas.requests import StockCreateRequest, StockUpdateRequest
from ...schemas.responses import StockResponse

logger = get_logger(__name__)

router = APIRouter()

StockID = Annotated[int, Path(ge=1, description="Stock ID")]
UseCase = Annotated[StockUseCaseInterface, Depends(get_stock_use_case)]
Context = Annotated[StoreContext, Depends(get_store_context)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def internal_error(operation: str, exc: Exception, settings: Settings, store_id: str | None = None) -> HTTPException:
    """Log a failed use case call and build the matching 500 error.

    Callers raise the result ``from exc`` so the cause stays attached.
    """
    logger.error(
        "stock_operation_failed",
        operation=operation,
        store_id=store_id,
        error_type=type(exc).__name__,
        error_message=str(exc),
    )
    detail = "Internal server error" if settings.is_production else str(exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def resolve_owner(body: StockCreateRequest, context: StoreContext, settings: Settings) -> tuple[str, str]:
    """Pick the store and user a write is recorded under.

    With authentication on, the API key decides both and a body naming
    another store is refused with 403. Otherwise non-empty body values
    win over the request context.
    """
    if not settings.auth_enabled:
        return body.store_id or context.store_id, body.user_id or context.user_id

    if body.store_id and body.store_id != context.store_id:
        logger.warning(
            "cross_store_write_refused",
            store_id=context.store_id,
            requested_store_id=body.store_id,
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"API key is not allowed to write to store '{body.store_id}'",
        )
    return context.store_id, context.user_id


def _create_request(body: StockCreateRequest, context: StoreContext, settings: Settings) -> CreateStockRequest:
    store_id, user_id = resolve_owner(body, context, settings)
    return CreateStockRequest(
        name=body.name,
        quantity=body.quantity,
        price=body.price,
        store_id=store_id,
        user_id=user_id,
    )


@router.get(
    "",
    response_model=list[StockResponse],
    status_code=status.HTTP_200_OK,
    summary="List stocks",
    description="List the stocks of the caller's store, paginated with limit/offset",
)
async def get_stocks(
    use_case: UseCase,
    context: Context,
    settings: AppSettings,
    limit: Annotated[int | None, Query(ge=0, description="Number of stocks to return")] = None,
    offset: Annotated[int | None, Query(ge=0, description="Number of stocks to skip")] = None,
) -> list[StockResponse]:
    request = GetStocksRequest(
        store_id=context.store_id,
        limit=settings.DEFAULT_PAGE_LIMIT if limit is None else limit,
        offset=offset,
    )
    try:
        stocks = await use_case.get_stocks(request)
    except Exception as e:
        raise internal_error("get_stocks", e, settings, context.store_id) from e

    return [StockResponse.from_entity(stock) for stock in stocks]


@router.get(
    "/csv",
    status_code=status.HTTP_200_OK,
    summary="Download stocks as CSV",
    description="Export every stock of the caller's store as a CSV attachment",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}, "description": "CSV data"}},
)
async def download_stocks_csv(use_case: UseCase, context: Context, settings: AppSettings) -> Response:
    """Export all stocks of the store.

    The listing is unbounded here; the use case caps it at
    ``CSV_EXPORT_MAX_ROWS``.
    """
    logger.info("CSV download requested", store_id=context.store_id)

    try:
        stocks = await use_case.get_stocks(GetStocksRequest(store_id=context.store_id, limit=None, offset=None))
        content = write_stocks_csv(stocks)
    except Exception as e:
        raise internal_error("download_stocks_csv", e, settings, context.store_id) from e

    filename = build_csv_filename(datetime.now())
    logger.info("CSV generated", store_id=context.store_id, filename=filename, rows=len(stocks))

    return Response(
        content=content.encode("utf-8"),
        status_code=status.HTTP_200_OK,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get(
    "/{stock_id}",
    response_model=StockResponse,
    status_code=status.HTTP_200_OK,
    summary="Get a stock",
)
async def get_stock(stock_id: StockID, use_case: UseCase, context: Context, settings: AppSettings) -> StockResponse:
    try:
        stock = await use_case.get_stock(context.store_id, stock_id)
    except Exception as e:
        raise internal_error("get_stock", e, settings, context.store_id) from e

    return StockResponse.from_entity(stock)


@router.post(
    "",
    response_model=StockResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a stock",
)
async def create_stock(
    body: StockCreateRequest, use_case: UseCase, context: Context, settings: AppSettings
) -> StockResponse:
    request = _create_request(body, context, settings)
    try:
        stock = await use_case.create_stock(request)
    except Exception as e:
        raise internal_error("create_stock", e, settings, context.store_id) from e

    return StockResponse.from_entity(stock)


@router.post(
    "/bulk",
    response_model=list[int],
    status_code=status.HTTP_201_CREATED,
    summary="Create stocks in bulk",
    description="Create every stock in the array, or none of them",
)
async def create_bulk_stock(
    body: Annotated[list[StockCreateRequest], Body(min_length=1)],
    use_case: UseCase,
    context: Context,
    settings: AppSettings,
) -> list[int]:
    requests = [_create_request(item, context, settings) for item in body]
    try:
        return await use_case.create_bulk_stock(requests)
    except Exception as e:
        raise internal_error("create_bulk_stock", e, settings, context.store_id) from e


@router.put(
    "/{stock_id}",
    response_model=StockResponse,
    status_code=status.HTTP_200_OK,
    summary="Update a stock",
)
async def update_stock(
    stock_id: StockID, body: StockUpdateRequest, use_case: UseCase, context: Context, settings: AppSettings
) -> StockResponse:
    store_id, user_id = resolve_owner(body, context, settings)
    request = UpdateStockRequest(
        stock_id=stock_id,
        name=body.name,
        quantity=body.quantity,
        price=body.price,
        store_id=store_id,
        user_id=user_id,
    )
    try:
        stock = await use_case.update_stock(request)
    except Exception as e:
        raise internal_error("update_stock", e, settings, context.store_id) from e

    return StockResponse.from_entity(stock)


@router.delete(
    "/{stock_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a stock",
    response_class=Response,
)
async def delete_stock(stock_id: StockID, use_case: UseCase, context: Context, settings: AppSettings) -> Response:
    try:
        await use_case.delete_stock(context.store_id, stock_id)
    except Exception as e:
        raise internal_error("delete_stock", e, settings, context.store_id) from e

    return Response(status_code=status.HTTP_204_NO_CONTENT)
