"""
Service wiring and FastAPI dependencies
"""

from typing import Optional
import threading

from ..accounts import SecurBankService
from ..config import SecurBankConfig, get_config
from ..documents import DocumentGenerator
from ..output_client import OutputClient
from ..pdf import PdfGenerationService


class SecurBankSystem:
    """All SecurBank services, initialized once and shared by the routers"""
    
    def __init__(self, config: Optional[SecurBankConfig] = None,
                 output_client: Optional[OutputClient] = None):
        self.config = config or get_config()
        self.account_service = SecurBankService()
        
        self.output_client = output_client or self._create_output_client()
        self.pdf_service = PdfGenerationService(self.output_client)
        self.document_generator = DocumentGenerator(
            self.pdf_service, self.account_service, self.config
        )
    
    def _create_output_client(self) -> Optional[OutputClient]:
        """Create the output service client based on configuration"""
        # Only create a client if a renderer URL is configured
        if not self.config.forms_output_url:
            return None
        
        return OutputClient(
            base_url=self.config.forms_output_url,
            timeout=self.config.forms_output_timeout,
            api_key=self.config.forms_output_api_key or None
        )
    
    def close(self):
        if self.output_client is not None:
            self.output_client.close()


_system: Optional[SecurBankSystem] = None
_system_lock = threading.Lock()


def get_system() -> SecurBankSystem:
    """Dependency returning the process-wide SecurBankSystem"""
    global _system
    if _system is None:
        # Dependency runs in the thread pool; build exactly one system
        with _system_lock:
            if _system is None:
                _system = SecurBankSystem()
    return _system
