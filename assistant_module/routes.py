# app/assistant_module/routes.py
from datetime import date
from typing import List, Literal, Optional
from fastapi import APIRouter
from pydantic import BaseModel

from config import build_llm
from assistant_module.chat_agent import ChatAssistant

router = APIRouter()


class OptimalPeriodSummary(BaseModel):
    startDate: str
    endDate: str
    duration: int
    reason: str
    aiScore: int
    description: str


class ChatAttendanceData(BaseModel):
    totalDays: int
    requiredDays: int
    safeLeaveDays: int
    attendanceRule: int
    startDate: Optional[date] = None
    endDate: Optional[date] = None
    optimalLeaveDates: Optional[List[OptimalPeriodSummary]] = None


# Pydantic Model for incoming requests
class ChatRequest(BaseModel):
    message: str
    userType: Literal["student", "employee"]
    attendanceData: Optional[ChatAttendanceData] = None


class ChatResponse(BaseModel):
    response: str
    suggestions: List[str]
    recommendedDates: List[str] = []


# Global instance, the LLM is only built when an API key is configured
chat_assistant = ChatAssistant(llm=build_llm())


# --- API ENDPOINTS ---
@router.post("/chat", response_model=ChatResponse)
def chat(request: ChatRequest):
    """Answers holiday planning questions, using the LLM when one is configured."""
    attendance_data = request.attendanceData.model_dump() if request.attendanceData else None
    return chat_assistant.respond(request.message, request.userType, attendance_data)
