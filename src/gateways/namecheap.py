import logging
import warnings
from typing import Any, Dict, Optional

import httpx
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from src.config.config import NamecheapConfig
from src.utils.constants import NamecheapConst
from src.utils.decorators import try_except_decorator
from src.utils.exceptions import CollaboratorError
from src.utils.utils import split_domain, to_float


class NamecheapGateway:
    """
    Thin client for the Namecheap XML API.

    Responses are parsed with BeautifulSoup's html.parser, so tag and
    attribute names are matched lower-case (DomainCheckResult -> domaincheckresult).
    """

    def __init__(self, config: Optional[NamecheapConfig] = None) -> None:
        self.config = config or NamecheapConfig.from_env()

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    @property
    def base_url(self) -> str:
        return NamecheapConst.SANDBOX_URL if self.config.sandbox else NamecheapConst.PROD_URL

    def _request(self, command: str, params: Dict[str, Any]) -> BeautifulSoup:
        query = {
            "ApiUser": self.config.user,
            "ApiKey": self.config.api_key,
            "UserName": self.config.user,
            "ClientIp": self.config.client_ip,
            "Command": command,
            **params,
        }
        response = httpx.get(self.base_url, params=query, timeout=self.config.timeout)
        response.raise_for_status()

        with warnings.catch_warnings():
            warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
            soup = BeautifulSoup(response.text, "html.parser")
        api_response = soup.find("apiresponse")
        if api_response is None:
            raise CollaboratorError("Namecheap", "unexpected response format")
        if (api_response.get("status") or "").upper() == "ERROR":
            errors = [e.get_text(strip=True) for e in soup.find_all("error")]
            raise CollaboratorError("Namecheap", "; ".join(errors) or "request failed")
        return soup

    @try_except_decorator("Namecheap")
    def check(self, domain: str) -> Dict[str, Any]:
        soup = self._request(NamecheapConst.CHECK_COMMAND, {"DomainList": domain})
        result = soup.find("domaincheckresult")
        if result is None:
            raise CollaboratorError("Namecheap", f"no check result for {domain}")

        premium = (result.get("ispremiumname") or "").lower() == "true"
        return {
            "domain": result.get("domain") or domain,
            "available": (result.get("available") or "").lower() == "true",
            "premium": premium,
            "premium_price": to_float(result.get("premiumregistrationprice")) if premium else None,
        }

    @try_except_decorator("Namecheap")
    def get_tld_price(self, tld: str) -> Optional[float]:
        """One-year registration price for *tld*, or None when the registrar lists none."""
        soup = self._request(NamecheapConst.PRICING_COMMAND, {
            "ProductType": "DOMAIN",
            "ProductCategory": "DOMAINS",
            "ActionName": "REGISTER",
            "ProductName": tld.upper(),
        })
        for price in soup.find_all("price"):
            if price.get("duration") == "1":
                return to_float(price.get("yourprice") or price.get("price")) or None
        return None

    @try_except_decorator("Namecheap")
    def register(self, domain: str) -> Dict[str, Any]:
        params: Dict[str, Any] = {"DomainName": domain, "Years": "1"}
        contact = self.config.contact
        for role in NamecheapConst.CONTACT_ROLES:
            params.update({
                f"{role}FirstName": contact.first_name,
                f"{role}LastName": contact.last_name,
                f"{role}Address1": contact.address1,
                f"{role}City": contact.city,
                f"{role}StateProvince": contact.state_province,
                f"{role}PostalCode": contact.postal_code,
                f"{role}Country": contact.country,
                f"{role}Phone": contact.phone,
                f"{role}EmailAddress": contact.email_address,
            })

        soup = self._request(NamecheapConst.CREATE_COMMAND, params)
        result = soup.find("domaincreateresult")
        if result is None or (result.get("registered") or "").lower() != "true":
            raise CollaboratorError("Namecheap", f"registration of {domain} was not confirmed")

        logging.info("Registered %s (charged %s)", domain, result.get("chargedamount"))
        return {"domain": domain, "registered": True, "charged_amount": to_float(result.get("chargedamount"))}

    @try_except_decorator("Namecheap")
    def set_vercel_dns(self, domain: str) -> bool:
        sld, tld = split_domain(domain)
        soup = self._request(NamecheapConst.SET_DNS_COMMAND, {
            "SLD": sld,
            "TLD": tld,
            "Nameservers": NamecheapConst.VERCEL_NAMESERVERS,
        })
        result = soup.find("domaindnssetcustomresult")
        if result is None or (result.get("updated") or "").lower() != "true":
            raise CollaboratorError("Namecheap", f"DNS update for {domain} was not confirmed")
        return True
