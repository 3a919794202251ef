"""
routers/ — FastAPI route modules.

Each file contains a thin APIRouter. Validation and business logic
live in controllers/ and services/; routers only translate between
HTTP and HttpRequest/HttpResponse.
"""
