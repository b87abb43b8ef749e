# backend/app/main.py
import logging

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.routers import api_router
from app.core.config import settings
from app.db.mongo import connect_to_mongo, close_mongo_connection
from app.services.saved_route_service import RouteStore

from app.middlewares.log_middleware import RequestLogMiddleware

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="easymap")
# 테스트에서 startup 없이 의존성만 교체할 수 있도록 기본값 지정
app.state.http_client = None
app.state.mongo_client = None
app.state.route_store = RouteStore(list_limit=settings.routes_list_limit)

app.include_router(api_router, prefix="")

@app.get("/")
async def root():
    return {"ok": True}

@app.on_event("startup")
async def startup_event():
    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout)
    mongo_client, collection = await connect_to_mongo(settings)
    app.state.mongo_client = mongo_client
    app.state.route_store = RouteStore(collection, list_limit=settings.routes_list_limit)

@app.on_event("shutdown")
async def shutdown_event():
    if app.state.http_client is not None:
        await app.state.http_client.aclose()
    await close_mongo_connection(app.state.mongo_client)

# CORS 설정: 기본값은 모든 origin 허용
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 요청 로그 미들웨어 등록
app.add_middleware(RequestLogMiddleware)
