import fitz
import httpx
import pytest

from scanme.core import Settings
from scanme.main import create_app
from scanme.services.analysis import AnalysisService


class FakeLLM:
    def __init__(self, reply='{"overallScore": 82, "strengths": ["Clear summary"]}'):
        self.reply = reply
        self.error = None
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def temp_dir(tmp_path):
    return tmp_path / "temp"


@pytest.fixture
def settings(temp_dir):
    return Settings(temp_dir=str(temp_dir))


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
async def client(anyio_backend, settings, llm):
    app = create_app(settings, AnalysisService(llm, settings))
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def make_pdf():
    def _make(*pages: str) -> bytes:
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            page.insert_text((72, 72), text)
        data = doc.tobytes()
        doc.close()
        return data

    return _make
