from fastapi import FastAPI

from fastapi_no_ai import NoAILayer, create_robots_txt_router

REDIRECT_URL = "https://www.example.com/nothing-to-see-here"

app = FastAPI()

# Redirect AI crawlers; each redirect gets a fresh `?=<nanoseconds>` suffix
NoAILayer(REDIRECT_URL).install(app)

# Ask them politely first
app.include_router(create_robots_txt_router())


@app.get("/")
def index():
    return {"message": "Hello, human"}


@app.get("/articles/{article_id}")
def get_article(article_id: int):
    return {"id": article_id, "title": f"Article {article_id}"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
