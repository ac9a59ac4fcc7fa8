"""
Customer Document Module

Builds the form data for SecurBank's standard documents (account
statements, loan applications, transaction histories, certificates and
financial reports) and renders them through the PDF generation service.
"""

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Mapping, Optional
import time

from .accounts import SecurBankService
from .config import SecurBankConfig, get_config
from .logging_config import get_logger
from .pdf import PdfGenerationService
from .util import format_amount, format_currency, is_valid_email


ACCOUNT_STATEMENT_TEMPLATE = "account-statement.xdp"
LOAN_APPLICATION_TEMPLATE = "loan-application.xdp"
TRANSACTION_HISTORY_TEMPLATE = "transaction-history.xdp"
CERTIFICATE_TEMPLATE = "certificate.xdp"
FINANCIAL_REPORT_TEMPLATE = "financial-report.xdp"

INCOME_FIELDS = ("income1", "income2", "income3")
EXPENSE_FIELDS = ("expense1", "expense2", "expense3")

TRANSACTION_COLUMNS = ("date", "description", "amount", "type")


def _epoch_millis() -> int:
    return int(time.time() * 1000)


def get_float_value(data: Mapping[str, Any], key: str) -> float:
    """Numeric value of a field; missing or unparsable values count as 0"""
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value))
    except ValueError:
        return 0.0


class DocumentGenerator:
    """Generates customer-facing PDF documents from XDP templates"""

    def __init__(
        self,
        pdf_service: PdfGenerationService,
        account_service: Optional[SecurBankService] = None,
        config: Optional[SecurBankConfig] = None
    ):
        self.pdf_service = pdf_service
        self.account_service = account_service or SecurBankService()
        self.config = config or get_config()
        self.logger = get_logger("securbank.documents")

    def template_path(self, template_name: str) -> str:
        """Full repository path of a named template"""
        return f"{self.config.forms_template_root.rstrip('/')}/{template_name}"

    def generate_account_statement(self, customer_name: str, account_number: str,
                                   balance: float) -> bytes:
        """
        Generate an account statement PDF.

        The account number is shown both formatted and masked so the
        template can choose which one to print.
        """
        self.logger.info(f"Generating account statement for customer: {customer_name}")

        form_data = {
            "customerName": customer_name,
            "accountNumber": self.account_service.format_account_number(account_number),
            "maskedAccountNumber": self.account_service.mask_account_number(account_number),
            "balance": format_amount(balance),
            "formattedBalance": format_currency(balance),
            "statementDate": date.today().isoformat(),
            "currency": self.config.statement_currency,
        }

        return self.pdf_service.generate_pdf_from_xdp(
            self.template_path(ACCOUNT_STATEMENT_TEMPLATE), form_data
        )

    def generate_loan_application(self, application_data: Mapping[str, Any]) -> bytes:
        """Generate a loan application PDF from submitted application fields"""
        self.logger.info("Generating loan application PDF")

        email = application_data.get("email")
        form_data = {
            # Personal information
            "applicantFirstName": application_data.get("firstName"),
            "applicantLastName": application_data.get("lastName"),
            "applicantEmail": email,
            "applicantEmailValid": str(is_valid_email(email)).lower(),
            "applicantPhone": application_data.get("phone"),

            # Loan details
            "loanAmount": application_data.get("loanAmount"),
            "loanPurpose": application_data.get("purpose"),
            "loanTerm": application_data.get("term"),

            # Financial information
            "annualIncome": application_data.get("annualIncome"),
            "monthlyExpenses": application_data.get("monthlyExpenses"),

            "applicationDate": datetime.now(timezone.utc).isoformat(),
            "applicationId": application_data.get("applicationId") or f"AUTO-{_epoch_millis()}",
        }

        return self.pdf_service.generate_pdf_from_xdp(
            self.template_path(LOAN_APPLICATION_TEMPLATE), form_data
        )

    def generate_transaction_history(self, account_number: str,
                                     transactions: List[Mapping[str, Any]]) -> bytes:
        """
        Generate a transaction history PDF.

        The template has a fixed number of rows, so transactions beyond
        `pdf_max_transactions` are counted but not listed.
        """
        self.logger.info(
            f"Generating transaction history for account: "
            f"{self.account_service.mask_account_number(account_number)}"
        )

        form_data: Dict[str, Any] = {
            "accountNumber": self.account_service.format_account_number(account_number),
            "reportDate": date.today().isoformat(),
            "totalTransactions": str(len(transactions)),
        }

        for i, transaction in enumerate(transactions[:self.config.pdf_max_transactions]):
            for column in TRANSACTION_COLUMNS:
                form_data[f"transaction{i}_{column}"] = transaction.get(column)

        return self.pdf_service.generate_pdf_from_xdp(
            self.template_path(TRANSACTION_HISTORY_TEMPLATE), form_data
        )

    def generate_certificate(self, recipient_name: str, certificate_type: str,
                             issue_date: str) -> bytes:
        """Generate a certificate PDF"""
        self.logger.info(f"Generating certificate for: {recipient_name}")

        form_data = {
            "recipientName": recipient_name,
            "certificateType": certificate_type,
            "issueDate": issue_date,
            "certificateNumber": f"CERT-{_epoch_millis()}",
            "issuingAuthority": self.config.issuing_authority,
        }

        return self.pdf_service.generate_pdf_from_xdp(
            self.template_path(CERTIFICATE_TEMPLATE), form_data
        )

    def generate_financial_report(self, report_data: Mapping[str, Any]) -> bytes:
        """Generate a financial report PDF with income and expense totals"""
        self.logger.info("Generating financial report")

        form_data: Dict[str, Any] = dict(report_data)

        total_income = sum(get_float_value(report_data, key) for key in INCOME_FIELDS)
        total_expenses = sum(get_float_value(report_data, key) for key in EXPENSE_FIELDS)
        net_amount = total_income - total_expenses

        form_data["totalIncome"] = format_amount(total_income)
        form_data["totalExpenses"] = format_amount(total_expenses)
        form_data["netAmount"] = format_amount(net_amount)
        form_data["reportGeneratedDate"] = datetime.now(timezone.utc).isoformat()

        return self.pdf_service.generate_pdf_from_xdp(
            self.template_path(FINANCIAL_REPORT_TEMPLATE), form_data
        )
