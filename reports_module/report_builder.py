# app/reports_module/report_builder.py
"""
Downloadable attendance reports.

"pdf" reports are a self-contained HTML document that the browser prints to
PDF; "excel" reports are CSV that spreadsheet apps open directly.
"""
import csv
import io
import logging
from datetime import datetime, timezone
from html import escape
from typing import Dict, Any, List, Optional

from errors import ReportGenerationError

logger = logging.getLogger("holiday-planner.reports")

FILE_EXTENSIONS = {"pdf": "pdf", "excel": "csv"}

AI_FEATURES = [
    "🎯 AI-Optimized Leave Date Recommendations",
    "📅 Smart Calendar Sync with Google/Outlook",
    "🤖 Intelligent Risk Assessment & Monitoring",
    "🌟 Festival & Holiday Optimization",
]

BENEFITS = [
    "Never miss optimal vacation windows",
    "Automatic attendance risk alerts",
    "Personalized planning based on your schedule",
    "AI-powered long weekend suggestions",
]


def generate_summary(attendance_data: Dict[str, Any], user_type: str) -> str:
    """One-paragraph risk, flexibility and strategy summary."""
    safe = attendance_data["safeLeaveDays"]
    total = attendance_data["totalDays"]

    summary = "🤖 AI Quick Analysis: "
    if safe <= 0:
        summary += "🚨 CRITICAL: Zero flexibility remaining. Perfect attendance required."
    elif safe <= 3:
        summary += "⚠️ HIGH RISK: Only single-day absences recommended."
    elif safe <= 7:
        summary += "🔶 MODERATE: Plan 2-3 day breaks with careful timing."
    elif safe <= 15:
        summary += "✅ SAFE: Good flexibility for strategic planning."
    else:
        summary += "🌟 OPTIMAL: Excellent flexibility for vacation planning."

    buffer_pct = (safe / total * 100) if total else 0
    summary += f" 📊 {buffer_pct:.0f}% flexibility buffer. "

    if user_type == "student":
        summary += "🎓 Student Tip: Coordinate with academic calendar and avoid exam periods."
    else:
        summary += "💼 Professional Tip: Plan around project deadlines and team schedules."

    if safe > 15:
        summary += " 🚀 Strategy: Plan 2-3 major vacations with strategic spacing."
    elif safe > 7:
        summary += " 🎯 Strategy: One major vacation plus monthly breaks."
    elif safe > 3:
        summary += " ⚖️ Strategy: Quarterly long weekends with emergency reserves."
    elif safe > 0:
        summary += " 🎱 Strategy: Precise timing for maximum impact."

    return summary


def build_report_content(attendance_data: Dict[str, Any], user_info: Dict[str, Any], generated_at: datetime) -> Dict[str, Any]:
    user_type = user_info["userType"]
    return {
        "title": f"{'Student' if user_type == 'student' else 'Employee'} AI Holiday Planning Report",
        "generatedAt": generated_at.isoformat(),
        "period": f"{user_info['startDate'].isoformat()} - {user_info['endDate'].isoformat()}",
        "summary": {
            "Total Working Days": attendance_data["totalDays"],
            "Required Attendance Days": attendance_data["requiredDays"],
            "Safe Leave Days": attendance_data["safeLeaveDays"],
            "Attendance Rule": f"{attendance_data['attendanceRule']}%",
            "Status": "Safe" if attendance_data["safeLeaveDays"] > 0 else "At Risk",
        },
        "recommendations": list(attendance_data.get("recommendations") or []),
        "warnings": list(attendance_data.get("warnings") or []),
        "suggestedHolidayDates": list(attendance_data.get("suggestedHolidayDates") or []),
        "aiSummary": generate_summary(attendance_data, user_type),
        "userInfo": {
            "User Type": user_type,
            "Institution Type": user_info.get("institutionType") or "",
            "Project Deadlines": user_info.get("projectDeadlines") or "",
        },
    }


def _html_list(items: List[str], css_class: str, marker: str) -> str:
    return "\n".join(f'<div class="{css_class}">{marker} {escape(item)}</div>' for item in items)


def render_html(content: Dict[str, Any]) -> str:
    summary_rows = "\n".join(
        f"<tr><th>{escape(label)}</th><td>{escape(str(value))}</td></tr>"
        for label, value in content["summary"].items()
    )
    sections = [
        ("🤖 AI Summary", f'<p class="ai-summary">{escape(content["aiSummary"])}</p>'),
        ("✅ Recommendations", _html_list(content["recommendations"], "recommendation", "✓")),
    ]
    if content["warnings"]:
        sections.append(("⚠️ Warnings", _html_list(content["warnings"], "warning", "⚠")))
    if content["suggestedHolidayDates"]:
        sections.append(("📅 Suggested Holiday Periods", _html_list(content["suggestedHolidayDates"], "holiday-date", "📅")))
    sections.append(("✨ Features", _html_list(AI_FEATURES, "feature-item", "")))
    sections.append(("🎁 Benefits", _html_list(BENEFITS, "benefit-item", "•")))

    body = "\n".join(f'<div class="section"><h2>{title}</h2>\n{html}</div>' for title, html in sections)
    return f"""<!DOCTYPE html>
<html>
<head>
    <title>{escape(content["title"])}</title>
    <meta charset="UTF-8">
    <style>
        body {{ font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 40px; line-height: 1.6; color: #333; }}
        .header {{ text-align: center; border-bottom: 3px solid #667eea; padding-bottom: 20px; }}
        table {{ border-collapse: collapse; width: 100%; }}
        th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; }}
        .warning {{ color: #b45309; }}
        .recommendation {{ color: #047857; }}
    </style>
</head>
<body>
<div class="header">
    <h1>{escape(content["title"])}</h1>
    <p>Period: {escape(content["period"])}</p>
    <p>Generated: {escape(content["generatedAt"])}</p>
</div>
<div class="section"><h2>📊 Attendance Summary</h2>
<table>
{summary_rows}
</table></div>
{body}
</body>
</html>"""


def render_csv(content: Dict[str, Any]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow([content["title"]])
    writer.writerow(["Generated", content["generatedAt"]])
    writer.writerow(["Period", content["period"]])
    writer.writerow([])
    writer.writerow(["ATTENDANCE SUMMARY"])
    for label, value in content["summary"].items():
        writer.writerow([label, value])
    writer.writerow([])
    writer.writerow(["USER INFORMATION"])
    for label, value in content["userInfo"].items():
        writer.writerow([label, value])
    writer.writerow([])
    writer.writerow(["AI SUMMARY"])
    writer.writerow([content["aiSummary"]])
    writer.writerow([])
    writer.writerow(["RECOMMENDATIONS"])
    writer.writerows([f"✓ {rec}"] for rec in content["recommendations"])
    writer.writerow([])
    writer.writerow(["WARNINGS"])
    writer.writerows([f"⚠ {warning}"] for warning in content["warnings"])
    writer.writerow([])
    writer.writerow(["SUGGESTED HOLIDAY PERIODS"])
    writer.writerows([f"📅 {hint}"] for hint in content["suggestedHolidayDates"])
    writer.writerow([])
    writer.writerow(["FEATURES"])
    writer.writerows([feature] for feature in AI_FEATURES)
    writer.writerow([])
    writer.writerow(["BENEFITS"])
    writer.writerows([f"• {benefit}"] for benefit in BENEFITS)
    return buffer.getvalue()


def generate_report(
    attendance_data: Dict[str, Any],
    user_info: Dict[str, Any],
    fmt: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Build a report file for download.

    Args:
        attendance_data: totalDays, requiredDays, safeLeaveDays, attendanceRule,
            recommendations, warnings and optional suggestedHolidayDates.
        user_info: userType, startDate, endDate and optional
            institutionType/projectDeadlines.
        fmt: "pdf" (HTML content) or "excel" (CSV content).
        now: Timestamp stamped into the filename and report.

    Returns:
        dict: downloadUrl (always empty), filename and fileContent.

    Raises:
        ReportGenerationError: If the format is unknown or the data is incomplete.
    """
    now = now or datetime.now(timezone.utc)
    if fmt not in FILE_EXTENSIONS:
        raise ReportGenerationError(f"Unsupported report format '{fmt}'")

    try:
        content = build_report_content(attendance_data, user_info, now)
        file_content = render_html(content) if fmt == "pdf" else render_csv(content)
    except (KeyError, TypeError, AttributeError) as e:
        logger.error(f"Report generation error: {e}")
        raise ReportGenerationError(f"Failed to generate report: missing or invalid field {e}") from e

    filename = f"ai-holiday-planner-{user_info['userType']}-{now.date().isoformat()}.{FILE_EXTENSIONS[fmt]}"
    logger.info(f"Generated {fmt} report", extra={"user_type": user_info["userType"]})
    return {"downloadUrl": "", "filename": filename, "fileContent": file_content}
