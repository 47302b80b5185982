def test_ping_endpoint_reports_database_connectivity(client):
    """
    Validate the public health endpoint payload.

    1. Call the ping endpoint.
    2. Validate the message and DB connectivity flag.
    """
    response = client.get("/api/v1/ping")
    assert response.status_code == 200

    payload = response.json()
    assert payload["message"] == "Member query API is running"
    assert payload["db_connected"] is True
