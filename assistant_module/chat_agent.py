# app/assistant_module/chat_agent.py
"""
Holiday planning chat assistant.

Answers come from an LLM when one is configured; otherwise, or when the LLM
call fails, keyword rules pick a canned answer built from the user's
attendance data.
"""
import logging
from datetime import date
from typing import Dict, Any, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

logger = logging.getLogger("holiday-planner.assistant")

FALLBACK_REPLY = "I'm sorry, I couldn't process your request right now."


def _contains_any(text: str, words) -> bool:
    return any(word in text for word in words)


def risk_label(safe_leave_days: int) -> str:
    if safe_leave_days <= 0:
        return "🚨 HIGH RISK"
    if safe_leave_days <= 5:
        return "⚠️ MODERATE RISK"
    return "✅ SAFE ZONE"


def build_system_prompt(user_type: str, attendance_data: Optional[Dict[str, Any]]) -> str:
    """System prompt for the LLM, embedding whatever attendance data is known."""
    lines = [
        f"You are an AI Holiday Planning Assistant helping {user_type}s with attendance management, "
        "optimal holiday timing and work-life balance.",
        "",
    ]
    if attendance_data:
        safe = attendance_data.get("safeLeaveDays", 0)
        lines += [
            "📊 Current User Data:",
            f"- Total Working Days: {attendance_data.get('totalDays')}",
            f"- Required Attendance Days: {attendance_data.get('requiredDays')}",
            f"- Safe Leave Days Available: {safe}",
            f"- Attendance Requirement: {attendance_data.get('attendanceRule')}%",
            f"- Risk Status: {risk_label(safe)}",
        ]
        optimal = attendance_data.get("optimalLeaveDates") or []
        if optimal:
            lines.append("")
            lines.append("🎯 AI-Optimized Leave Periods:")
            for period in optimal[:3]:
                lines.append(
                    f"• {period['reason']}: {period['startDate']} to {period['endDate']} "
                    f"({period['duration']} days, AI Score: {period['aiScore']}/100)"
                )
        if attendance_data.get("startDate") and attendance_data.get("endDate"):
            lines.append("")
            lines.append(f"📅 Planning Period: {attendance_data['startDate']} to {attendance_data['endDate']}")
    else:
        lines.append("🔄 No attendance data available yet. Recommend using the calculator first for personalized insights.")

    lines += [
        "",
        "Response Guidelines:",
        "- Always provide specific, actionable advice with dates when possible",
        "- Include AI scores and reasoning for recommendations",
        "- Balance data-driven insights with practical considerations",
        "- Keep answers comprehensive yet digestible",
    ]
    return "\n".join(lines)


def generate_follow_ups(message: str, attendance_data: Optional[Dict[str, Any]]) -> tuple:
    """Suggestions and recommended dates to attach to an LLM answer."""
    text = message.lower()
    suggestions: List[str] = []
    recommended_dates: List[str] = []
    safe = (attendance_data or {}).get("safeLeaveDays", 0)

    if _contains_any(text, ("calendar", "integration")):
        suggestions += ["Export to Google Calendar", "Set up automatic reminders", "Sync with Outlook"]
        if safe > 0:
            recommended_dates += ["This Friday: Long weekend start", "Next month: Extended break"]
    elif _contains_any(text, ("vacation", "holiday")):
        suggestions += ["Plan my perfect vacation dates", "Show long weekend opportunities", "Best travel seasons for me"]
        recommended_dates += [
            "December 20-30: Winter holidays",
            "March 15-20: Spring break",
            "July 15-25: Summer vacation",
        ]
    elif _contains_any(text, ("when", "timing")):
        suggestions += ["Show me specific calendar dates", "What's the optimal timing strategy?", "How to maximize my time off?"]
        for period in ((attendance_data or {}).get("optimalLeaveDates") or [])[:3]:
            recommended_dates.append(f"{period['startDate']}: {period['reason']}")
    else:
        suggestions += ["Show me my optimal leave dates", "How to integrate with calendar apps?", "What's my attendance risk level?"]

    return suggestions, recommended_dates


def rule_based_response(
    message: str, user_type: str, attendance_data: Optional[Dict[str, Any]], today: date
) -> Dict[str, Any]:
    """Keyword-matched answer used when no LLM is available."""
    text = message.lower()
    suggestions: List[str] = []
    recommended_dates: List[str] = []
    safe = attendance_data.get("safeLeaveDays", 0) if attendance_data else 0

    if _contains_any(text, ("when", "best time", "dates")):
        if attendance_data and safe > 0:
            response = "🎯 **AI Calendar Analysis Complete!** Based on your attendance data, here are the optimal leave periods:\n\n"
            optimal = attendance_data.get("optimalLeaveDates") or []
            if optimal:
                response += "📅 **Top AI-Recommended Dates:**\n"
                for index, period in enumerate(optimal[:3], 1):
                    response += (
                        f"{index}. **{period['reason']}**: {period['startDate']} - {period['endDate']} "
                        f"({period['duration']} days)\n   🎯 AI Score: {period['aiScore']}/100 - {period['description']}\n\n"
                    )
                    recommended_dates.append(f"{period['startDate']} to {period['endDate']}: {period['reason']}")

            if today.month >= 10 or today.month <= 2:
                response += "❄️ **Winter Season Strategy:** Perfect time for year-end holidays and festival celebrations.\n"
                recommended_dates += ["December 20-30: Year-end holidays", "October 15-20: Diwali celebrations"]
            elif 3 <= today.month <= 6:
                response += "🌸 **Spring/Summer Strategy:** Ideal for travel and outdoor activities.\n"
                recommended_dates += ["March 10-15: Holi celebrations", "April 15-25: Spring break travel"]

            suggestions += ["Show me specific calendar dates", "How to integrate with Google Calendar?", "What are the risks of each date?"]
        else:
            response = (
                "📊 **Calendar Integration Ready!** To provide you with specific dates and AI-optimized "
                "recommendations, please use our attendance calculator first. This will enable me to:\n\n"
                "✨ Generate personalized calendar dates\n📅 Integrate with your schedule\n"
                "🎯 Provide AI-scored recommendations\n⚡ Create ready-to-use calendar events"
            )
            suggestions += ["Go to Calculator", "How does the AI calendar work?", "What makes dates optimal?"]

    elif _contains_any(text, ("calendar", "integration", "google", "outlook")):
        response = (
            "📅 **AI Calendar Integration Features:**\n\n"
            "🔄 **Smart Sync**: Sync your optimal leave dates with Google Calendar or Outlook\n"
            "🎯 **AI Recommendations**: Get suggestions for the best times to take breaks\n"
            "⚠️ **Risk Alerts**: Receive notifications before you risk attendance issues\n\n"
        )
        if attendance_data and safe > 0:
            response += (
                f"🎉 **Ready for Integration!** With {safe} safe leave days, I can help you create calendar events for:\n"
                "• Strategic long weekends\n• Festival celebrations\n• Mental health breaks\n• Extended vacation periods\n"
            )
            recommended_dates += ["Next Friday: Long weekend opportunity", "Month-end: Strategic break period"]
        suggestions += ["Export my schedule to calendar", "Set up automatic reminders", "How to sync with mobile calendar?"]

    elif _contains_any(text, ("holiday", "vacation", "trip")):
        if attendance_data and safe > 0:
            response = "🏖️ **AI Holiday Planning Analysis:**\n\n"
            if safe >= 7:
                response += "✈️ **Week-long Trip Options:**\nYou can safely plan 1-2 week-long vacations! AI recommends:\n"
                recommended_dates += [
                    "Last week of December: Year-end vacation",
                    "Mid-April: Spring vacation",
                    "Early October: Autumn getaway",
                ]
            elif safe >= 3:
                response += "🌟 **Long Weekend Escapes:**\nPerfect for 3-4 day getaways! AI suggests:\n"
                recommended_dates += ["Next long weekend: 3-day trip", "Festival weekend: Cultural travel"]

            if user_type == "student":
                response += "\n🎓 **Student-Optimized Timing:**\n• Plan around exam schedules\n• Utilize semester breaks\n• Coordinate with study groups\n"
            else:
                response += "\n💼 **Professional-Optimized Timing:**\n• Coordinate with team schedules\n• Plan around project deadlines\n• Utilize company holidays\n"
            suggestions += ["Plan my dream vacation", "Best destinations for my dates", "How to maximize my time off?"]
        else:
            response = (
                "🎯 **Get Your Personalized Holiday Calendar!** Use our AI calculator to unlock:\n\n"
                "📅 Specific vacation dates tailored to your schedule\n🗓️ AI-optimized travel periods\n"
                "✈️ Ready-to-book holiday recommendations\n🎉 Festival and celebration planning"
            )
            suggestions += ["Calculate my vacation dates", "What vacations can I afford (attendance-wise)?", "How to plan around work/study?"]

    elif _contains_any(text, ("balance", "stress", "burnout")):
        response = "🧘 **AI-Powered Work-Life Balance Calendar:**\n\n"
        if attendance_data and safe > 0:
            score = "Excellent" if safe >= 10 else "Good" if safe >= 5 else "Needs Attention"
            response += f"📊 **Your Balance Score:** {score}\n\n🗓️ **Recommended Wellness Schedule:**\n"
            recommended_dates += [
                "Every 3rd Friday: Mental health day",
                "Month-end weekends: Social activities",
                "Quarterly: Extended wellness break",
            ]
            if user_type == "student":
                response += "📚 **Student Wellness Calendar:**\n• Weekly study breaks: Fridays off\n• Mid-semester retreat: Mental health focus\n• Post-exam recovery: Celebration time\n"
            else:
                response += "💼 **Professional Wellness Calendar:**\n• Bi-weekly mental health days\n• Quarterly team-building time off\n• Monthly social connection breaks\n"
        suggestions += ["Create my wellness calendar", "How often should I take breaks?", "Best stress-relief timing?"]

    elif _contains_any(text, ("safe", "risk", "danger")):
        if not attendance_data:
            response = "📊 I need your attendance data to assess your risk. Please run the calculator first."
        elif safe > 5:
            response = (
                f"✅ **Safe Zone Confirmed!** Your AI calendar shows excellent flexibility:\n\n"
                f"🎯 **Available Options:** {safe} safe leave days\n📅 **Risk Level:** Low - You can plan confidently\n"
                "🗓️ **Recommendation:** Use 80% for planned activities, keep 20% for emergencies\n\n"
            )
            recommended_dates += ["Immediate: Any date works", "Next month: Perfect planning window", "Quarterly: Extended break options"]
        elif safe > 0:
            response = (
                f"⚠️ **Moderate Risk Zone:** Your calendar requires strategic planning:\n\n"
                f"🎯 **Available:** {safe} carefully managed days\n📅 **Strategy:** Plan well in advance\n"
                "🗓️ **Best Approach:** Single days or long weekends only\n\n"
            )
            recommended_dates += ["Public holidays: Extended weekends", "Emergency only: Medical situations"]
        else:
            response = (
                "🚨 **High Risk Alert!** Your calendar shows zero flexibility:\n\n"
                "⛔ **Status:** No safe leave days remaining\n📅 **Action Required:** Perfect attendance needed\n"
                "🆘 **Emergency Protocol:** Consult supervisor/advisor immediately\n"
            )
        suggestions += ["Show risk calendar view", "How to improve my safety buffer?", "Emergency leave protocols"]

    else:
        response = (
            "🤖 **AI Holiday Planning Assistant Ready!** I can help with:\n\n"
            "🗓️ AI-optimized leave date recommendations\n📊 Attendance risk monitoring\n"
            "✨ Personalized holiday planning strategies\n🎉 Festival and public holiday optimization\n\n"
            "🔥 **Popular Questions:**\n\"When can I take my next vacation?\"\n"
            "\"Show me the best dates for a long weekend\"\n\"What's my attendance risk level?\"\n\n"
            "💡 **Pro Tip:** Use our calculator first to unlock personalized calendar dates!"
        )
        suggestions += ["When can I take my next vacation?", "Show me optimal holiday dates", "How does AI calendar integration work?"]

    return {"response": response, "suggestions": suggestions, "recommendedDates": recommended_dates}


class ChatAssistant:
    """
    Chat front door shared by the API.
    The LLM is optional and injected; None means rule-based answers only.
    """

    def __init__(self, llm: Optional[BaseChatModel] = None):
        self.llm = llm

    def respond(
        self,
        message: str,
        user_type: str,
        attendance_data: Optional[Dict[str, Any]] = None,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        """
        Answer a chat message, with fallback to the keyword rules.

        Args:
            message: The user's free-text question.
            user_type: "student" or "employee".
            attendance_data: Result of a previous calculation, if any.
            today: Reference date for seasonal advice.

        Returns:
            dict: response, suggestions and recommendedDates.
        """
        today = today or date.today()
        if self.llm is None:
            return rule_based_response(message, user_type, attendance_data, today)

        try:
            reply = self.llm.invoke([
                SystemMessage(content=build_system_prompt(user_type, attendance_data)),
                HumanMessage(content=message),
            ])
            content = reply.content if hasattr(reply, "content") else reply
            suggestions, recommended_dates = generate_follow_ups(message, attendance_data)
            return {
                "response": content or FALLBACK_REPLY,
                "suggestions": suggestions,
                "recommendedDates": recommended_dates,
            }
        except Exception as llm_error:
            logger.warning(f"LLM chat failed: {llm_error}, using rule-based answer")
            return rule_based_response(message, user_type, attendance_data, today)
