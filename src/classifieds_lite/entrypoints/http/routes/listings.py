from fastapi import APIRouter, Depends, Request, status

from classifieds_lite.domain.listing import CallerIdentity
from classifieds_lite.entrypoints.http.auth import require_caller
from classifieds_lite.entrypoints.http.dependencies import (
    get_create_listing_use_case,
    get_search_listings_use_case,
)
from classifieds_lite.entrypoints.http.dtos.listing_create import (
    CreateListingRequestDTO,
    CreateListingResponseDTO,
)
from classifieds_lite.entrypoints.http.dtos.listing_search import ListingSearchResponseDTO
from classifieds_lite.entrypoints.http.error_responses import ErrorResponse
from classifieds_lite.entrypoints.http.mappers.listing_create_mapper import ListingCreateMapper
from classifieds_lite.entrypoints.http.mappers.listing_search_mapper import ListingSearchMapper
from classifieds_lite.use_cases.create_listing import CreateListing
from classifieds_lite.use_cases.search_listings import SearchListings


router = APIRouter(tags=["Listings"])


@router.get(
    "/listings",
    response_model=ListingSearchResponseDTO,
    summary="Search listings",
    description="""
    Search listings with optional filters and pagination.

    ## Filters
    - All filters use AND semantics
    - city: exact match
    - category: exact match on the category slug
    - status: `active` or `inactive`
    - search: case-insensitive substring match on the title

    ## Pagination
    - Default limit: 10
    - Max limit: 50 (larger values are rejected, not clamped)
    - Use offset for pagination; results are newest first

    ## Example
    ```
    GET /listings?city=Lahore&status=active&limit=10
    ```
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid query parameters"},
        500: {"model": ErrorResponse, "description": "Backend failure"},
    },
)
def list_listings(
    request: Request,
    use_case: SearchListings = Depends(get_search_listings_use_case),
) -> ListingSearchResponseDTO:
    """Search listings endpoint following parse → execute → map → return pattern."""
    # 1. Compile raw parameters into a domain query spec
    query = ListingSearchMapper.to_query_spec(request.query_params)

    # 2. Execute use case
    result = use_case.execute(query)

    # 3. Map to response
    return ListingSearchMapper.to_response(result)


@router.post(
    "/listings",
    response_model=CreateListingResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a listing",
    description="""
    Create a listing owned by the authenticated caller.

    The owner is taken from the identity attached by the upstream identity
    provider, never from the request body.
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request body"},
        401: {"model": ErrorResponse, "description": "Missing caller identity"},
        403: {"model": ErrorResponse, "description": "Caller is not a registered user"},
        500: {"model": ErrorResponse, "description": "Backend failure"},
    },
)
def create_listing(
    payload: CreateListingRequestDTO,
    caller: CallerIdentity = Depends(require_caller),
    use_case: CreateListing = Depends(get_create_listing_use_case),
) -> CreateListingResponseDTO:
    """
    Create listing endpoint.

    require_caller is resolved before the body is parsed and before the
    session is used, so anonymous requests never reach the database.
    """
    listing = ListingCreateMapper.to_domain(payload)

    result = use_case.execute(caller, listing)

    return ListingCreateMapper.to_response(result)
