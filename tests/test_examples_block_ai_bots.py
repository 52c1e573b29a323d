from fastapi.testclient import TestClient

from block_ai_bots import REDIRECT_URL
from block_ai_bots import app as block_app
from plain_redirect_middleware import app as plain_app
from plain_redirect_middleware import hits

from fastapi_no_ai import bot_blocking_robots_txt


def test_block_ai_bots_example_serves_humans():
    client = TestClient(block_app)

    response = client.get("/articles/7", headers={"User-Agent": "Mozilla/5.0 (X11; Linux x86_64)"})

    assert response.status_code == 200
    assert response.json() == {"id": 7, "title": "Article 7"}


def test_block_ai_bots_example_redirects_crawlers():
    client = TestClient(block_app)

    response = client.get(
        "/articles/7",
        headers={"User-Agent": "Mozilla/5.0 (compatible; Meta-ExternalAgent/1.1)"},
        follow_redirects=False,
    )

    assert response.status_code == 301
    assert response.headers["location"].startswith(REDIRECT_URL + "?=")


def test_block_ai_bots_example_robots_txt():
    client = TestClient(block_app)

    response = client.get("/robots.txt", headers={"User-Agent": "Mozilla/5.0"})

    assert response.status_code == 200
    assert response.text == bot_blocking_robots_txt()
    assert "User-Agent: GPTBot\nDisallow: /\n" in response.text


def test_plain_redirect_example():
    client = TestClient(plain_app)
    hits.clear()

    human = client.get("/data", headers={"User-Agent": "Mozilla/5.0"})
    crawler = client.get(
        "/data", headers={"User-Agent": "OAI-SearchBot/1.0"}, follow_redirects=False
    )

    assert human.json() == {"data": [1, 2, 3]}
    assert crawler.status_code == 301
    assert crawler.headers["location"] == "https://www.example.com/"
    assert hits == ["Mozilla/5.0"]
