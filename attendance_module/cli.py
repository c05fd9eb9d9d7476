# app/attendance_module/cli.py
from datetime import datetime

from errors import InvalidInputError
from attendance_module.core_calculator import calculate_attendance
from attendance_module.planning_hints import PlanningHints, USER_TYPES
from calendar_module.holiday_planner import get_public_holidays
import config


def parse_date_range(date_input: str):
    """Parse 'DD/MM/YY-DD/MM/YY' into two dates."""
    date_from_str, date_to_str = date_input.split("-")
    start_date = datetime.strptime(date_from_str.strip(), "%d/%m/%y").date()
    end_date = datetime.strptime(date_to_str.strip(), "%d/%m/%y").date()
    return start_date, end_date


def get_user_input():
    """Get an attendance planning request from the console."""
    print("\n" + "="*60)
    print("AI HOLIDAY PLANNER (CLI Edition)")
    print("="*60)

    user_type = input(f"\nAre you a {' or '.join(USER_TYPES)}? ").strip().lower()
    if user_type not in USER_TYPES:
        print("Invalid user type.")
        return None

    while True:
        try:
            date_input = input("Enter Planning Period (DD/MM/YY-DD/MM/YY): ").strip()
            start_date, end_date = parse_date_range(date_input)
            break
        except ValueError:
            print("Invalid date format. Please use DD/MM/YY-DD/MM/YY.")

    try:
        rule = int(input("Enter minimum attendance percentage (e.g. 75): ").strip())
    except ValueError:
        print("Invalid percentage. Please enter a whole number.")
        return None

    current_pct = input("Current attendance % (leave blank if unknown): ").strip()
    leaves_taken = input("Leaves already taken (leave blank for 0): ").strip()
    try:
        current_pct = float(current_pct) if current_pct else None
        leaves_taken = int(leaves_taken) if leaves_taken else 0
    except ValueError:
        print("Invalid number.")
        return None

    if user_type == "student":
        hints = PlanningHints(
            institution_type=input("Institution type (university/college/school, optional): ").strip().lower() or None,
            exam_dates=input("Upcoming exam dates (optional): ").strip() or None,
        )
    else:
        hints = PlanningHints(
            project_deadlines=input("Upcoming project deadlines (optional): ").strip() or None,
        )

    return {
        "start_date": start_date,
        "end_date": end_date,
        "attendance_rule": rule,
        "user_type": user_type,
        "current_attendance_percentage": current_pct,
        "leaves_availed_already": leaves_taken,
        "hints": hints,
    }


def print_calculation(result: dict):
    print(f"\n{'='*60}\nATTENDANCE ANALYSIS\n{'='*60}")
    print(f"Working days:     {result['totalDays']}")
    print(f"Required days:    {result['requiredDays']}")
    print(f"Safe leave days:  {result['safeLeaveDays']}")
    print(f"At risk:          {'YES' if result['isAtRisk'] else 'no'}")

    for title, items in (("WARNINGS", result["warnings"]), ("RECOMMENDATIONS", result["recommendations"])):
        if items:
            print(f"\n{title}")
            for i, item in enumerate(items, 1):
                print(f"{i}. {item}")

    if result["suggestedLeaveDates"]:
        print("\nSUGGESTED LEAVE DATES")
        for s in result["suggestedLeaveDates"]:
            print(f"- {s['date'].isoformat()} ({s['type']}, {s['duration']}d): {s['reason']}")

    if result["optimalLeaveDates"]:
        print("\nOPTIMAL LEAVE PERIODS")
        for p in result["optimalLeaveDates"]:
            print(f"- {p['startDate'].isoformat()} to {p['endDate'].isoformat()} [score {p['aiScore']}]: {p['reason']}")


def print_holidays(start_date, end_date):
    result = get_public_holidays(start_date, end_date, config.DEFAULT_COUNTRY)
    source_note = "" if result["source"] == "live" else " (offline data, may be incomplete)"
    print(f"\n{'='*60}\nPUBLIC HOLIDAYS{source_note}\n{'='*60}")
    for h in result["holidays"]:
        print(f"- {h['date'].isoformat()} {h['name']} ({h['type']})")
    for lw in result["suggestedLongWeekends"]:
        print(f"* {lw['description']}: {lw['startDate'].isoformat()} to {lw['endDate'].isoformat()}")


def main():
    print("Welcome to the AI Holiday Planner!")

    while True:
        try:
            request = get_user_input()
            if request is None:
                continue

            try:
                result = calculate_attendance(**request)
                print_calculation(result)
            except InvalidInputError as e:
                print(f"Cannot calculate: {e}")
                continue

            if input("\nShow public holidays for this period? (y/n): ").strip().lower() == "y":
                print_holidays(request["start_date"], request["end_date"])

        except KeyboardInterrupt:
            print("\n\nExiting...")
            break

        continue_choice = input("\n\nPlan another period? (y/n): ").strip().lower()
        if continue_choice != 'y':
            break

    print("\nThank you for using the AI Holiday Planner!")


if __name__ == "__main__":
    main()
