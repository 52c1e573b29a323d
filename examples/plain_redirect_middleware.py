from fastapi import FastAPI, Request

from fastapi_no_ai import NoAIMiddleware

app = FastAPI()
app.add_middleware(
    NoAIMiddleware,
    redirect_url="https://www.example.com/",
    force_refetching=False,
)

hits = []


@app.get("/data")
def get_data(request: Request):
    hits.append(request.headers.get("user-agent"))
    return {"data": [1, 2, 3]}
