"""ASGI entrypoint for the FutureFit API."""

from futurefit.api.app import create_app
from futurefit.containers import build_container

app = create_app(build_container())
