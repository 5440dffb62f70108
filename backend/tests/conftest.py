"""
Surf Spots Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── sample_document: Decoded stored document with two realistic records
    ├── sample_bytes: The same document encoded as stored on disk
    ├── memory_storage: MemoryStorage preloaded with sample_bytes
    ├── spot_file: Temporary spot.json holding sample_bytes
    └── test_client: HTTPX AsyncClient over an app bound to spot_file
"""

import json
import os
import tempfile

# Settings are read at import time; point them at throwaway values first
os.environ["DATA_FILE"] = os.path.join(tempfile.mkdtemp(prefix="surfspots_test_"), "spot.json")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from surfspots.services.file_storage import FileStorage
from surfspots.services.memory_storage import MemoryStorage


def _thumb(url: str, width: int, height: int) -> dict:
    return {"url": url, "width": width, "height": height}


@pytest.fixture
def sample_document() -> dict:
    """Two records shaped like the upstream export, plus an offset token."""
    return {
        "records": [
            {
                "id": "rec5aF9TjMjBicXCK",
                "fields": {
                    "Surf Break": ["Reef Break"],
                    "Difficulty Level": 4,
                    "Destination": "Pipeline",
                    "Geocode": "eyJpIjoiUGlwZWxpbmUsIE9haHUsIEhhd2FpaSJ9",
                    "Influencers": ["recD1zp1pQYc8O7l2", "rec1ptbRPxhS8rRun"],
                    "Magic Seaweed Link": "https://magicseaweed.com/Pipeline-Backdoor-Surf-Report/616/",
                    "Photos": [
                        {
                            "id": "attf6yu03NAtCuv5L",
                            "url": "https://dl.airtable.com/ZuXJZ2NnTF40kCdBfTld_thomas-ashlock-64485-unsplash.jpg",
                            "filename": "thomas-ashlock-64485-unsplash.jpg",
                            "size": 688397,
                            "type": "image/jpeg",
                            "thumbnails": {
                                "small": _thumb("https://dl.airtable.com/yfKxR9ZQqiT7drKxpjdF_small.jpg", 52, 36),
                                "large": _thumb("https://dl.airtable.com/cFfMuU8NQjaEskeC3B2h_large.jpg", 744, 512),
                                "full": _thumb("https://dl.airtable.com/psynuQNmSvOTe3BWa0Fw_full.jpg", 2233, 1536),
                            },
                        }
                    ],
                    "Peak Surf Season Begins": "2018-07-22",
                    "Destination State/Country": "Oahu, Hawaii",
                    "Peak Surf Season Ends": "2018-08-31",
                    "Address": "Pipeline, Oahu, Hawaii",
                },
                "createdTime": "2018-05-31T00:16:16.000Z",
            },
            {
                "id": "recT98Wnf12B2eTbQ",
                "fields": {
                    "Surf Break": ["Point Break"],
                    "Difficulty Level": 5,
                    "Destination": "Supertubes",
                    "Destination State/Country": "Jeffreys Bay, South Africa",
                    "Address": "Supertubes, Jeffreys Bay, South Africa",
                },
                "createdTime": "2018-05-31T00:16:16.000Z",
            },
        ],
        "offset": "itrPLa7LSDL0Ye8aJ/recT98Wnf12B2eTbQ",
    }


@pytest.fixture
def sample_bytes(sample_document) -> bytes:
    return json.dumps(sample_document).encode("utf-8")


@pytest.fixture
def memory_storage(sample_bytes) -> MemoryStorage:
    return MemoryStorage(sample_bytes)


@pytest.fixture
def spot_file(tmp_path, sample_bytes):
    """A spot.json in a fresh temporary directory."""
    path = tmp_path / "spot.json"
    path.write_bytes(sample_bytes)
    return path


@pytest_asyncio.fixture
async def test_client(spot_file):
    """
    HTTPX AsyncClient talking to an app bound to spot_file.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/spots")
            assert response.status_code == 200
    """
    from surfspots.main import create_app

    app = create_app(storage=FileStorage(spot_file))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
