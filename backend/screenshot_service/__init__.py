"""
Screenshot microservice.

Stand-alone FastAPI app rendering pages with headless Chromium (Playwright).
"""
