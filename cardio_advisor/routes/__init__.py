"""
FastAPI routers for all API endpoints.

Routes only parse and validate input, call the service layer, and return
its response model. No clinical logic lives here.
"""
