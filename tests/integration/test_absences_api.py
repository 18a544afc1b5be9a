# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for absence request endpoints."""

PENDING = {
    "id": 5,
    "employeeId": 1,
    "type": "vacation",
    "status": "pending",
    "startDate": "2024-03-04",
    "endDate": "2024-03-04",
    "dayPortion": "am",
}


class TestValidateEndpoint:
    """Tests for POST /api/v1/absences/validate."""

    def test_conflicts(self, client):
        """Overlaps and time entries are reported."""
        response = client.post(
            "/api/v1/absences/validate",
            json={
                "employeeId": 1,
                "startDate": "2024-03-01",
                "endDate": "2024-03-08",
                "existingRequests": [PENDING],
                "timeEntries": [
                    {
                        "employeeId": 1,
                        "start": "2024-03-05T08:00:00",
                        "end": "2024-03-05T16:00:00",
                    }
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["isValid"] is False
        assert [e["code"] for e in data["errors"]] == [
            "OVERLAPPING_REQUEST",
            "TIME_ENTRY_CONFLICT",
        ]

    def test_editing_itself_is_valid(self, client):
        """The edited request is excluded from the overlap check."""
        response = client.post(
            "/api/v1/absences/validate",
            json={
                "employeeId": 1,
                "startDate": "2024-03-04",
                "endDate": "2024-03-05",
                "excludeId": 5,
                "existingRequests": [PENDING],
            },
        )

        assert response.json() == {"isValid": True, "errors": []}


class TestTransitionEndpoints:
    """Tests for approving and rejecting requests."""

    def test_approve(self, client):
        """A pending request becomes approved."""
        response = client.post("/api/v1/absences/approve", json=PENDING)

        assert response.status_code == 200
        assert response.json()["status"] == "approved"
        assert response.json()["dayPortion"] == "am"

    def test_reject(self, client):
        """A pending request becomes rejected."""
        response = client.post("/api/v1/absences/reject", json=PENDING)
        assert response.json()["status"] == "rejected"

    def test_cannot_approve_twice(self, client):
        """Decided requests answer 409."""
        response = client.post(
            "/api/v1/absences/approve", json={**PENDING, "status": "approved"}
        )

        assert response.status_code == 409
        assert "approved" in response.json()["detail"]

    def test_sick_leave_with_portion_is_accepted(self, client):
        """A leftover half-day portion on sick leave does not fail the request."""
        response = client.post(
            "/api/v1/absences/approve", json={**PENDING, "type": "sick_leave"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "approved"

    def test_multi_day_half_vacation_rejected(self, client):
        """A half-day vacation must cover a single day."""
        response = client.post(
            "/api/v1/absences/approve", json={**PENDING, "endDate": "2024-03-05"}
        )
        assert response.status_code == 422
