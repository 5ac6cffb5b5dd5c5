# lighthouse/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lighthouse.models import AnalysisRequest, ReportResponse
from lighthouse.services import report_service

# --- FastAPI App Initialization ---
app = FastAPI(
    title="Lighthouse Report",
    description="An API that runs Google PageSpeed Insights and returns a plain-text Lighthouse summary.",
    version="1.0.0"
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Endpoints ---
@app.post("/api/lighthouse-report", response_model=ReportResponse)
async def get_lighthouse_report(request: AnalysisRequest):
    """
    Receives a URL and analysis options, runs PageSpeed Insights and returns the text report.
    Transport and API failures are reported inside the text, not as HTTP errors.
    """
    report = await report_service.get_lighthouse_report(request)
    return ReportResponse(report=report)

# A simple root endpoint to confirm the API is running
@app.get("/")
def read_root():
    return {"message": "Welcome to the Lighthouse Report API"}
