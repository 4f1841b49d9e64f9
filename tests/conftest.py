"""
Shared pytest fixtures for poster analyzer tests.
"""

import pytest
import sys
import json
import importlib.util
from pathlib import Path
from types import SimpleNamespace

# Project root for finding Cloud Function modules
PROJECT_ROOT = Path(__file__).parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _load_module_from_path(module_name: str, file_path: Path):
    """Load a module from a specific file path."""
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


# Load Cloud Function module with a unique name at module load time
_poster_analyzer_module = _load_module_from_path(
    'poster_analyzer_main',
    PROJECT_ROOT / 'poster-analyzer' / 'main.py'
)


# ============================================================================
# Poster Analyzer Function Fixtures
# ============================================================================

@pytest.fixture
def poster_analyzer_module():
    """Returns the loaded poster-analyzer Cloud Function module."""
    return _poster_analyzer_module


@pytest.fixture
def analyze_poster():
    """Returns main entry point from poster-analyzer."""
    return _poster_analyzer_module.analyze_poster


@pytest.fixture
def mock_flask_request():
    """Factory for creating mock Flask request objects."""
    class MockRequest:
        def __init__(self, json_data=None, method='POST'):
            self._json = json_data
            self.method = method
            self.data = b''

        def get_json(self, force=False, silent=False):
            return self._json

    return MockRequest


# ============================================================================
# Poster Data Fixtures
# ============================================================================

@pytest.fixture
def valid_poster_dict():
    """A complete poster object as the model would return it."""
    return {
        "name": "XMServerUpdateLog·服务器更新日志",
        "tag": "新品",
        "shortDescription": "让玩家第一时间了解服务器更新",
        "price": "¥98.00",
        "summary": "在游戏内展示服务器更新日志的插件",
        "features": ["游戏内更新日志界面", "支持多语言", "管理员在线编辑"],
        "imageUrls": [
            "https://rustsb.com/attachments/1001/",
            "https://rustsb.com/attachments/1002/",
        ],
    }


@pytest.fixture
def valid_poster_json(valid_poster_dict):
    """The valid poster object serialized as bare JSON."""
    return json.dumps(valid_poster_dict, ensure_ascii=False)


@pytest.fixture
def fenced_poster_response(valid_poster_json):
    """The valid poster JSON wrapped in a ```json fence with surrounding prose."""
    return f"Here is the poster data:\n```json\n{valid_poster_json}\n```\nLet me know if you need more."


@pytest.fixture
def sample_resource_html():
    """A resource page with scripts, styles, comments and inline SVG."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>XMServerUpdateLog | RustSB</title>
        <style>.price { color: red; }</style>
        <script>window.trackingSecret = "do-not-send";</script>
    </head>
    <body>
        <!-- sidebar starts here -->
        <aside class="sidebar">
            <span class="price">¥98.00</span>
            <svg width="10" height="10"><path d="M0 0 L10 10"/><text>svg-label</text></svg>
        </aside>
        <article>
            <h1>XMServerUpdateLog</h1>
            <p>Shows the server changelog in game.</p>
            <img src="https://rustsb.com/attachments/1001/">
        </article>
        <script type="text/javascript">console.log("inline-script-body");</script>
    </body>
    </html>
    """


# ============================================================================
# Extraction Collaborator Fixtures
# ============================================================================

@pytest.fixture
def fake_collaborator():
    """
    Factory for async collaborators.

    fake_collaborator(text=...) replies with that text;
    fake_collaborator(error=...) raises that exception.
    Every call is recorded on the returned collaborator's `calls` list.
    """
    def factory(text=None, error=None, reply=None):
        calls = []

        async def collaborator(system_instructions, user_content, schema):
            calls.append({
                'system_instructions': system_instructions,
                'user_content': user_content,
                'schema': schema,
            })
            if error is not None:
                raise error
            if reply is not None:
                return reply
            return SimpleNamespace(text=text)

        collaborator.calls = calls
        return collaborator

    return factory
