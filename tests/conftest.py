import pytest
import sys
import os

from aiohttp import web
from stellar_sdk import Keypair

sys.path.append(os.getcwd())

from tests.fakes import get_free_port


@pytest.fixture
def account_id():
    return Keypair.random().public_key


# --- Fixtures: Config ---

@pytest.fixture(scope="function")
def federation_server_config():
    port = get_free_port()
    return {"host": "127.0.0.1", "port": port, "url": f"http://127.0.0.1:{port}"}


# --- Mock Servers ---

@pytest.fixture
async def mock_federation(federation_server_config):
    """Starts a local server publishing stellar.toml and a federation endpoint."""
    class FederationMockState:
        def __init__(self):
            self.received_queries = []
            self.records = {}  # (type, q) -> response dict
            self.forward_record = None
            self.base_url = federation_server_config["url"]
            self.domain = f"127.0.0.1:{federation_server_config['port']}"
            self.federation_url = f"{self.base_url}/federation"
            self.toml = f'FEDERATION_SERVER="{self.federation_url}"\n'
            self.status_override = None

        def add_record(self, query_type, q, record):
            self.records[(query_type, q)] = record

    state = FederationMockState()
    routes = web.RouteTableDef()

    @routes.get("/.well-known/stellar.toml")
    async def handle_toml(request):
        return web.Response(text=state.toml, content_type="text/plain")

    @routes.get("/federation")
    async def handle_federation(request):
        query = list(request.query.items())
        state.received_queries.append(query)
        if state.status_override is not None:
            return web.json_response({"detail": "error"}, status=state.status_override)

        query_type = request.query.get("type")
        if query_type == "forward" and state.forward_record is not None:
            return web.json_response(state.forward_record)
        record = state.records.get((query_type, request.query.get("q")))
        if record is None:
            return web.json_response({"detail": "not found"}, status=404)
        return web.json_response(record)

    app = web.Application()
    app.add_routes(routes)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, federation_server_config["host"], federation_server_config["port"])
    await site.start()

    yield state

    await runner.cleanup()
