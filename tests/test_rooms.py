"""Tests for room booking."""

from conftest import login_student, login_warden


class TestBookRoom:
    def test_book_room(self, client, read_collection):
        login_student(client)

        response = client.post("/api/rooms/book", json={"roomNumber": "101"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Room booked successfully"}
        assert read_collection("rooms") == [
            {"roomNumber": "101", "studentId": "1", "status": "booked"},
        ]

    def test_double_booking_is_rejected(self, client, read_collection):
        login_student(client)
        first = client.post("/api/rooms/book", json={"roomNumber": "101"})

        login_warden(client)
        second = client.post("/api/rooms/book", json={"roomNumber": "101"})

        assert first.status_code == 200
        assert second.status_code == 400
        assert second.json() == {"success": False, "message": "Room already booked"}
        assert [r["roomNumber"] for r in read_collection("rooms")] == ["101"]

    def test_numeric_room_number_matches_string(self, client, read_collection):
        login_student(client)
        client.post("/api/rooms/book", json={"roomNumber": 204})

        response = client.post("/api/rooms/book", json={"roomNumber": "204"})

        assert response.status_code == 400
        assert read_collection("rooms")[0]["roomNumber"] == "204"

    def test_different_rooms_both_book(self, client, read_collection):
        login_student(client)
        client.post("/api/rooms/book", json={"roomNumber": "101"})
        client.post("/api/rooms/book", json={"roomNumber": "102"})

        assert [r["roomNumber"] for r in read_collection("rooms")] == ["101", "102"]

    def test_missing_room_number_is_400(self, client, read_collection):
        login_student(client)

        response = client.post("/api/rooms/book", json={})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert read_collection("rooms") == []

    def test_requires_session(self, client):
        response = client.post("/api/rooms/book", json={"roomNumber": "101"})

        assert response.status_code == 401
