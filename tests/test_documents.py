"""
Tests for customer document generation
"""

from datetime import date
from unittest.mock import Mock

import pytest

from securbank.config import SecurBankConfig
from securbank.documents import DocumentGenerator, get_float_value
from securbank.output_client import MockOutputClient
from securbank.pdf import PdfGenerationService


class TestGetFloatValue:
    """Test lenient numeric field parsing"""

    def test_numeric_values(self):
        """Test numbers and numeric strings"""
        data = {"a": 10, "b": 2.5, "c": "3.25", "d": " 4 "}
        assert get_float_value(data, "a") == 10.0
        assert get_float_value(data, "b") == 2.5
        assert get_float_value(data, "c") == 3.25
        assert get_float_value(data, "d") == 4.0

    def test_fallback_to_zero(self):
        """Test missing, None, booleans and garbage count as zero"""
        data = {"none": None, "text": "n/a", "flag": True}
        assert get_float_value(data, "missing") == 0.0
        assert get_float_value(data, "none") == 0.0
        assert get_float_value(data, "text") == 0.0
        assert get_float_value(data, "flag") == 0.0


class TestDocumentGeneratorWithMockService:
    """Test form data handed to the PDF service"""

    def setup_method(self):
        self.pdf_service = Mock(spec=PdfGenerationService)
        self.pdf_service.generate_pdf_from_xdp.return_value = b"%PDF"
        self.config = SecurBankConfig(
            forms_template_root="/content/dam/securbank/forms/",
            pdf_max_transactions=3
        )
        self.generator = DocumentGenerator(self.pdf_service, config=self.config)

    def _last_call(self):
        args = self.pdf_service.generate_pdf_from_xdp.call_args[0]
        return args[0], args[1]

    def test_template_path(self):
        """Test template names are joined onto the configured root"""
        assert self.generator.template_path("a.xdp") == "/content/dam/securbank/forms/a.xdp"

    def test_generate_account_statement(self):
        """Test statement fields use the account number helpers"""
        result = self.generator.generate_account_statement("Jane Doe", "1234567890123456", 5000.505)

        assert result == b"%PDF"
        template, form_data = self._last_call()
        assert template == "/content/dam/securbank/forms/account-statement.xdp"
        assert form_data["customerName"] == "Jane Doe"
        assert form_data["accountNumber"] == "1234-5678-9012-3456"
        assert form_data["maskedAccountNumber"] == "****-****-****-3456"
        assert form_data["balance"] == "5000.51"
        assert form_data["formattedBalance"] == "$5000.51"
        assert form_data["statementDate"] == date.today().isoformat()
        assert form_data["currency"] == "USD"

    def test_generate_loan_application(self):
        """Test application fields are renamed for the template"""
        self.generator.generate_loan_application({
            "firstName": "John",
            "lastName": "Doe",
            "email": "john@example.com",
            "loanAmount": 50000,
            "purpose": "Home improvement",
            "term": 60,
            "applicationId": "APP-1",
        })

        template, form_data = self._last_call()
        assert template.endswith("/loan-application.xdp")
        assert form_data["applicantFirstName"] == "John"
        assert form_data["applicantLastName"] == "Doe"
        assert form_data["applicantEmail"] == "john@example.com"
        assert form_data["applicantEmailValid"] == "true"
        assert form_data["applicantPhone"] is None
        assert form_data["loanAmount"] == 50000
        assert form_data["loanPurpose"] == "Home improvement"
        assert form_data["loanTerm"] == 60
        assert form_data["applicationId"] == "APP-1"
        assert "applicationDate" in form_data

    def test_loan_application_generated_id(self):
        """Test an application id is generated when none is given"""
        self.generator.generate_loan_application({"email": "bad"})

        _, form_data = self._last_call()
        assert form_data["applicationId"].startswith("AUTO-")
        assert form_data["applicationId"][5:].isdigit()
        assert form_data["applicantEmailValid"] == "false"

    def test_generate_transaction_history(self):
        """Test transactions are flattened and capped"""
        transactions = [
            {"date": f"2024-01-0{i + 1}", "description": f"Txn {i}", "amount": 10 * i, "type": "debit"}
            for i in range(5)
        ]

        self.generator.generate_transaction_history("12345678", transactions)

        template, form_data = self._last_call()
        assert template.endswith("/transaction-history.xdp")
        assert form_data["accountNumber"] == "1234-5678"
        assert form_data["totalTransactions"] == "5"
        assert form_data["transaction0_date"] == "2024-01-01"
        assert form_data["transaction2_description"] == "Txn 2"
        assert form_data["transaction2_amount"] == 20
        assert form_data["transaction2_type"] == "debit"
        assert "transaction3_date" not in form_data

    def test_generate_certificate(self):
        """Test certificate number and issuing authority"""
        self.generator.generate_certificate("Jane Doe", "Deposit", "2024-06-01")

        template, form_data = self._last_call()
        assert template.endswith("/certificate.xdp")
        assert form_data["recipientName"] == "Jane Doe"
        assert form_data["certificateType"] == "Deposit"
        assert form_data["issueDate"] == "2024-06-01"
        assert form_data["certificateNumber"].startswith("CERT-")
        assert form_data["issuingAuthority"] == "SecurBank Financial Services"

    def test_generate_financial_report(self):
        """Test totals are computed and input fields are kept"""
        self.generator.generate_financial_report({
            "companyName": "Acme",
            "income1": 1000,
            "income2": "500.25",
            "income3": None,
            "expense1": 200.1,
            "expense2": "oops",
        })

        template, form_data = self._last_call()
        assert template.endswith("/financial-report.xdp")
        assert form_data["companyName"] == "Acme"
        assert form_data["totalIncome"] == "1500.25"
        assert form_data["totalExpenses"] == "200.10"
        assert form_data["netAmount"] == "1300.15"
        assert "reportGeneratedDate" in form_data


class TestDocumentGeneratorEndToEnd:
    """Test documents render through the real PDF service"""

    def setup_method(self):
        self.output_client = MockOutputClient()
        self.generator = DocumentGenerator(
            PdfGenerationService(self.output_client),
            config=SecurBankConfig()
        )

    def test_statement_xml(self):
        """Test the statement reaches the renderer as escaped XML"""
        result = self.generator.generate_account_statement("O'Brien & Sons", "1234-5678", -42.5)

        assert result.startswith(b"%PDF")
        request = self.output_client.requests[0]
        assert request.template_path == "/content/dam/securbank/forms/account-statement.xdp"
        assert b"<customerName>O&apos;Brien &amp; Sons</customerName>" in request.data
        assert b"<formattedBalance>-$42.50</formattedBalance>" in request.data

    def test_loan_application_missing_fields(self):
        """Test absent application fields render as empty elements"""
        self.generator.generate_loan_application({"firstName": "John"})

        request = self.output_client.requests[0]
        assert b"<applicantPhone></applicantPhone>" in request.data
