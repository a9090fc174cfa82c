"""
Tests for the account and transaction listing endpoints.
"""


class TestListAccounts:

    def test_returns_demo_accounts(self, client, auth_headers):
        response = client.get("/api/accounts", headers=auth_headers)
        assert response.status_code == 200

        accounts = response.json()
        assert accounts == [
            {
                "id": "acc-001",
                "type": "checking",
                "balance": 5420.50,
                "accountNumber": "****1234",
            },
            {
                "id": "acc-002",
                "type": "savings",
                "balance": 12500.00,
                "accountNumber": "****5678",
            },
        ]

    def test_total_balance(self, client, auth_headers):
        accounts = client.get("/api/accounts", headers=auth_headers).json()
        assert round(sum(a["balance"] for a in accounts), 2) == 17920.50


class TestListTransactions:

    def test_returns_history(self, client, auth_headers):
        response = client.get("/api/transactions", headers=auth_headers)
        assert response.status_code == 200

        transactions = response.json()
        assert len(transactions) == 5
        assert transactions[0] == {
            "id": 1,
            "date": "2026-01-28",
            "description": "Salary Deposit",
            "amount": 3500.0,
            "type": "credit",
            "accountId": "acc-001",
        }

    def test_newest_first(self, client, auth_headers):
        transactions = client.get("/api/transactions", headers=auth_headers).json()
        assert [t["id"] for t in transactions] == [1, 2, 3, 4, 5]

    def test_transfer_legs_listed_before_history(self, client, auth_headers):
        client.post("/api/transfer", json={
            "fromAccountId": "acc-001",
            "toAccountId": "acc-002",
            "amount": 100,
        }, headers=auth_headers)

        transactions = client.get("/api/transactions", headers=auth_headers).json()
        assert [t["id"] for t in transactions] == [7, 6, 1, 2, 3, 4, 5]

    def test_requires_token(self, client):
        response = client.get("/api/transactions")
        assert response.status_code == 401
