"""Path and query parameter types shared by the routers."""
from typing import Annotated

from fastapi import Path, Query

from schemas.common import DB_ID_MAX, DB_ID_MIN

MAX_PAGE = 2**31 - 1

# Out-of-range ids are rejected with 400 before any query runs.
EntityId = Annotated[int, Path(ge=DB_ID_MIN, le=DB_ID_MAX)]
PageNumber = Annotated[int, Query(le=MAX_PAGE)]
PageSize = Annotated[int, Query(alias="pageSize")]
