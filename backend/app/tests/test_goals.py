"""
Tests for savings goal endpoints.
"""


def create_goal(client, headers, **overrides):
    payload = {"name": "Vacation", "targetAmount": 2000}
    payload.update(overrides)
    response = client.post("/api/goals", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def link_expense(client, headers, goal_id, amount):
    response = client.post(
        "/api/expenses",
        json={
            "description": "Deposit",
            "amount": amount,
            "category": "Travel",
            "date": "2026-02-01T09:00:00Z",
            "goalId": goal_id,
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_goal(client, auth_headers):
    goal = create_goal(client, auth_headers)
    assert goal["progressPercentage"] == 0
    assert "spentPercentage" not in goal
    assert goal["remainingAmount"] == 2000


def test_goal_progress(client, auth_headers):
    goal = create_goal(client, auth_headers, targetAmount=300)
    link_expense(client, auth_headers, goal["id"], 100)

    detail = client.get(f"/api/goals/{goal['id']}", headers=auth_headers).json()
    assert detail["currentAmount"] == 100
    assert detail["progressPercentage"] == 33.33
    assert detail["remainingAmount"] == 200
    assert detail["expenses"][0]["description"] == "Deposit"


def test_list_goals_with_metrics(client, auth_headers):
    goal = create_goal(client, auth_headers, targetAmount=100)
    link_expense(client, auth_headers, goal["id"], 150)
    create_goal(client, auth_headers, name="Car")

    body = client.get("/api/goals", headers=auth_headers).json()
    assert body["pagination"]["total"] == 2
    by_name = {g["name"]: g for g in body["items"]}
    assert by_name["Vacation"]["progressPercentage"] == 100
    assert by_name["Vacation"]["currentAmount"] == 150
    assert by_name["Car"]["progressPercentage"] == 0


def test_complete_goal(client, auth_headers):
    """Test toggling completion returns the goal with metrics."""
    goal = create_goal(client, auth_headers)
    link_expense(client, auth_headers, goal["id"], 500)

    response = client.post(f"/api/goals/{goal['id']}/complete", json={"isCompleted": True}, headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["isCompleted"] is True
    assert body["progressPercentage"] == 25
    assert body["currentAmount"] == 500

    response = client.post(f"/api/goals/{goal['id']}/complete", json={"isCompleted": False}, headers=auth_headers)
    assert response.json()["isCompleted"] is False

    body = client.get("/api/goals", params={"isCompleted": "false"}, headers=auth_headers).json()
    assert body["pagination"]["total"] == 1


def test_complete_goal_requires_boolean(client, auth_headers):
    goal = create_goal(client, auth_headers)
    for payload in ({"isCompleted": "true"}, {"isCompleted": 1}, {}):
        response = client.post(f"/api/goals/{goal['id']}/complete", json=payload, headers=auth_headers)
        assert response.status_code == 400, payload
        assert response.json()["code"] == "BAD_REQUEST"


def test_complete_foreign_goal(client, auth_headers, other_headers):
    goal = create_goal(client, auth_headers)
    response = client.post(f"/api/goals/{goal['id']}/complete", json={"isCompleted": True}, headers=other_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_delete_goal_unlinks_expenses(client, auth_headers):
    goal = create_goal(client, auth_headers)
    expense = link_expense(client, auth_headers, goal["id"], 20)

    response = client.delete(f"/api/goals/{goal['id']}", headers=auth_headers)
    assert response.json() == {"message": "Goal deleted successfully"}

    fetched = client.get(f"/api/expenses/{expense['id']}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json()["goalId"] is None
