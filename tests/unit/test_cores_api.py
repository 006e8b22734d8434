"""Unit tests for core administration and replication."""

import json

CORE_STATUS = {
    "responseHeader": {"status": 0},
    "initFailures": {"broken": "org.apache.solr.common.SolrException: missing config"},
    "status": {
        "core1": {
            "name": "core1",
            "instanceDir": "/var/solr/data/core1",
            "dataDir": "/var/solr/data/core1/data/",
            "config": "solrconfig.xml",
            "startTime": "2024-05-01T09:00:00.000Z",
            "uptime": 3600000,
            "index": {
                "numDocs": 10,
                "maxDoc": 12,
                "deletedDocs": 2,
                "version": 57,
                "segmentCount": 3,
                "current": True,
                "size": "20 KB",
                "lastModified": "2024-05-01T09:30:00.000Z",
            },
        }
    },
}


class TestCoreAdmin:
    """Test core status, creation and reload."""

    def test_core_status(self, client, solr, solr_headers):
        """Test that cores stay keyed by name with their index section intact."""
        solr.on("GET", "admin/cores", "STATUS", CORE_STATUS)

        response = client.get("/solr/cores", headers=solr_headers)

        assert response.status_code == 200
        assert response.json() == {
            "status": {
                "core1": {
                    "name": "core1",
                    "instanceDir": "/var/solr/data/core1",
                    "dataDir": "/var/solr/data/core1/data/",
                    "config": "solrconfig.xml",
                    "startTime": "2024-05-01T09:00:00.000Z",
                    "uptime": 3600000,
                    "index": {
                        "numDocs": 10,
                        "maxDoc": 12,
                        "deletedDocs": 2,
                        "version": 57,
                        "segmentCount": 3,
                        "current": True,
                        "size": "20 KB",
                        "lastModified": "2024-05-01T09:30:00.000Z",
                    },
                }
            },
            "initFailures": {
                "broken": "org.apache.solr.common.SolrException: missing config"
            },
        }

    def test_core_without_index_section(self, client, solr, solr_headers):
        solr.on(
            "GET",
            "admin/cores",
            "STATUS",
            {"responseHeader": {"status": 0}, "status": {"empty": {}}},
        )

        core = client.get("/solr/cores", headers=solr_headers).json()["status"]["empty"]

        assert core["name"] == "empty"
        assert core["index"]["numDocs"] == 0
        assert core["index"]["size"] == "0 bytes"

    def test_create_core(self, client, solr, solr_headers):
        """Test the CREATE parameters."""
        solr.on("GET", "admin/cores", "CREATE")

        response = client.post("/solr/cores", json={"name": "core2"}, headers=solr_headers)

        assert response.json() == {"success": True, "message": 'Core "core2" created successfully'}
        params = solr.calls[0].url.params
        assert params["name"] == "core2"
        assert params["instanceDir"] == "core2"
        assert params["config"] == "solrconfig.xml"
        assert params["dataDir"] == "data"

    def test_create_core_requires_name(self, client, solr, solr_headers):
        response = client.post("/solr/cores", json={}, headers=solr_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Core name is required"}
        assert solr.calls == []

    def test_reload_core(self, client, solr, solr_headers):
        solr.on("GET", "admin/cores", "RELOAD")

        response = client.post("/solr/cores/core1/reload", headers=solr_headers)

        assert response.json() == {"success": True, "message": 'Core "core1" reloaded successfully'}
        assert solr.calls[0].url.params["core"] == "core1"

    def test_reload_unknown_core(self, client, solr, solr_headers):
        """Test that a "not found" message maps to 404."""
        solr.on(
            "GET",
            "admin/cores",
            "RELOAD",
            {"error": {"msg": "Core with core name [nope] not found"}},
            status=400,
        )

        response = client.post("/solr/cores/nope/reload", headers=solr_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Core not found"}


class TestReplication:
    """Test replication setup and trigger."""

    def test_enable_as_master(self, client, solr, solr_headers):
        """Test that the master handler is registered and the core reloaded."""
        solr.on("POST", "core1/config")
        solr.on("GET", "admin/cores", "RELOAD")

        response = client.post(
            "/solr/cores/core1/replication/enable", json={"master": True}, headers=solr_headers
        )

        assert response.json() == {"success": True, "message": "Replication enabled as master"}
        body = json.loads(solr.calls_to("core1/config")[0].content)
        assert body["set-property"]["value"]["class"] == "solr.MasterReplicationHandler"
        assert solr.calls_to("admin/cores", "RELOAD")

    def test_enable_as_slave_points_at_same_server(
        self, client, solr, solr_headers, solr_url
    ):
        solr.on("POST", "core1/config")
        solr.on("GET", "admin/cores", "RELOAD")

        response = client.post(
            "/solr/cores/core1/replication/enable", json={"master": False}, headers=solr_headers
        )

        assert response.json()["message"] == "Replication enabled as slave"
        body = json.loads(solr.calls_to("core1/config")[0].content)
        assert body["set-property"]["value"]["config"]["masterUrl"] == (
            f"{solr_url}/core1/replication"
        )

    def test_replicate(self, client, solr, solr_headers):
        """Test that replication is triggered with fetchindex."""
        solr.on("GET", "core1/replication")

        response = client.post("/solr/cores/core1/replication/replicate", headers=solr_headers)

        assert response.json() == {"success": True, "message": "Replication process started"}
        assert solr.calls[0].url.params["command"] == "fetchindex"
