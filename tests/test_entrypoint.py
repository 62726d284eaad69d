import runpy

import uvicorn


def test_module_entrypoint_serves_the_app(monkeypatch):
	calls = []
	monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

	runpy.run_module("market_api.__main__", run_name="__main__")

	assert len(calls) == 1
	args, kwargs = calls[0]
	assert args == ("market_api.main:app",)
	assert set(kwargs) == {"host", "port"}
