"""
Tests for dashboard statistics.
"""
from datetime import datetime
from decimal import Decimal
import pytest
from app.models import Expense, Goal, User
from app.services.stats_service import dashboard_stats, month_over_month_change

NOW = datetime(2026, 3, 15, 9, 30)


@pytest.fixture
def user(db_session):
    user = User(username="dana", name="Dana", email="dana@example.com", hashed_password="x")
    db_session.add(user)
    db_session.commit()
    return user


def add_expense(db_session, user, amount, category, when, goal=None):
    expense = Expense(
        user_id=user.id,
        description=f"{category} {amount}",
        amount=Decimal(str(amount)),
        category=category,
        date=when,
        goal_id=goal.id if goal else None,
    )
    db_session.add(expense)
    db_session.commit()
    return expense


def add_goal(db_session, user, target, completed=False):
    goal = Goal(user_id=user.id, name=f"Goal {target}", target_amount=Decimal(target), is_completed=completed)
    db_session.add(goal)
    db_session.commit()
    return goal


def test_dashboard_with_no_data(db_session, user):
    """Test an empty dashboard has zero averages rather than errors."""
    stats = dashboard_stats(db_session, user.id, now=NOW)
    assert stats["expenses"]["total"] == 0
    assert stats["expenses"]["total_amount"] == 0
    assert stats["expenses"]["month_over_month_change"] == 0
    assert stats["expenses"]["by_category"] == []
    assert stats["goals"]["total"] == 0
    assert stats["goals"]["average_progress"] == 0


def test_dashboard_month_buckets_and_goals(db_session, user):
    g1 = add_goal(db_session, user, 200)
    g2 = add_goal(db_session, user, 40)
    add_goal(db_session, user, 50, completed=True)

    add_expense(db_session, user, 100, "Food", datetime(2026, 3, 2), goal=g1)
    add_expense(db_session, user, 50, "Travel", datetime(2026, 3, 10), goal=g2)
    add_expense(db_session, user, 80, "Food", datetime(2026, 2, 28, 23, 59))
    add_expense(db_session, user, 20, "Shopping", datetime(2026, 2, 1))
    add_expense(db_session, user, 10, "Food", datetime(2026, 1, 31, 23, 59))
    add_expense(db_session, user, 5, "Food", datetime(2026, 4, 1))

    stats = dashboard_stats(db_session, user.id, now=NOW)

    expenses = stats["expenses"]
    assert expenses["total"] == 6
    assert expenses["total_amount"] == Decimal("265")
    assert expenses["this_month"] == Decimal("150")
    assert expenses["last_month"] == Decimal("100")
    assert expenses["month_over_month_change"] == 50.0
    assert [(c["category"], c["amount"], c["count"]) for c in expenses["by_category"]] == [
        ("Food", Decimal("195"), 4),
        ("Travel", Decimal("50"), 1),
        ("Shopping", Decimal("20"), 1),
    ]

    goals = stats["goals"]
    assert goals["total"] == 3
    assert goals["completed"] == 1
    assert goals["total_target_amount"] == Decimal("290")
    assert goals["total_current_amount"] == Decimal("150")
    # 50% + capped 100% + 0%
    assert goals["average_progress"] == 50.0


def test_dashboard_ignores_other_users(db_session, user):
    other = User(username="erin", name="Erin", email="erin@example.com", hashed_password="x")
    db_session.add(other)
    db_session.commit()
    add_expense(db_session, other, 99, "Food", datetime(2026, 3, 1))
    add_goal(db_session, other, 10)

    stats = dashboard_stats(db_session, user.id, now=NOW)
    assert stats["expenses"]["total"] == 0
    assert stats["goals"]["total"] == 0


def test_month_over_month_change():
    assert month_over_month_change(Decimal(150), Decimal(100)) == Decimal("50.00")
    assert month_over_month_change(Decimal(50), Decimal(200)) == Decimal("-75.00")
    assert month_over_month_change(Decimal(10), Decimal(0)) == Decimal(0)


def test_month_boundaries_in_january(db_session, user):
    add_expense(db_session, user, 30, "Food", datetime(2025, 12, 31, 8, 0))
    add_expense(db_session, user, 70, "Food", datetime(2026, 1, 2))

    stats = dashboard_stats(db_session, user.id, now=datetime(2026, 1, 20))
    assert stats["expenses"]["this_month"] == Decimal("70")
    assert stats["expenses"]["last_month"] == Decimal("30")


def test_stats_endpoint(client, auth_headers):
    """Test the dashboard endpoint shape for a new user."""
    response = client.get("/api/stats", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert set(body["expenses"]) == {
        "total", "totalAmount", "thisMonth", "lastMonth", "monthOverMonthChange", "byCategory"
    }
    assert body["goals"]["averageProgress"] == 0
    assert body["goals"]["total"] == 0


def test_stats_requires_session(client):
    response = client.get("/api/stats")
    assert response.status_code == 401
