import unittest
import warnings
from unittest.mock import patch

import httpx
from bs4 import XMLParsedAsHTMLWarning

from src.config.config import NamecheapConfig
from src.gateways.namecheap import NamecheapGateway
from src.utils.exceptions import CollaboratorError

CHECK_OK = """<?xml version="1.0" encoding="utf-8"?>
<ApiResponse Status="OK" xmlns="http://api.namecheap.com/xml.response">
  <Errors />
  <CommandResponse Type="namecheap.domains.check">
    <DomainCheckResult Domain="idraulicoroma.it" Available="true" ErrorNo="0" Description=""
      IsPremiumName="false" PremiumRegistrationPrice="0" />
  </CommandResponse>
</ApiResponse>"""

CHECK_PREMIUM = """<?xml version="1.0" encoding="utf-8"?>
<ApiResponse Status="OK">
  <CommandResponse Type="namecheap.domains.check">
    <DomainCheckResult Domain="best.com" Available="true" IsPremiumName="true"
      PremiumRegistrationPrice="2500.00" />
  </CommandResponse>
</ApiResponse>"""

PRICING = """<?xml version="1.0" encoding="utf-8"?>
<ApiResponse Status="OK">
  <CommandResponse Type="namecheap.users.getPricing">
    <UserGetPricingResult>
      <ProductType Name="domains">
        <ProductCategory Name="register">
          <Product Name="it">
            <Price Duration="1" DurationType="YEAR" Price="12.98" YourPrice="11.48" Currency="USD" />
            <Price Duration="2" DurationType="YEAR" Price="25.96" YourPrice="22.96" Currency="USD" />
          </Product>
        </ProductCategory>
      </ProductType>
    </UserGetPricingResult>
  </CommandResponse>
</ApiResponse>"""

API_ERROR = """<?xml version="1.0" encoding="utf-8"?>
<ApiResponse Status="ERROR">
  <Errors>
    <Error Number="1011102">Parameter APIKey is invalid</Error>
  </Errors>
</ApiResponse>"""

DNS_OK = """<?xml version="1.0" encoding="utf-8"?>
<ApiResponse Status="OK">
  <CommandResponse Type="namecheap.domains.dns.setCustom">
    <DomainDNSSetCustomResult Domain="idraulicoroma.it" Updated="true" />
  </CommandResponse>
</ApiResponse>"""


def xml_response(body):
    return httpx.Response(200, text=body, request=httpx.Request("GET", "https://api.namecheap.com/xml.response"))


class TestNamecheapGateway(unittest.TestCase):
    def setUp(self):
        self.gateway = NamecheapGateway(NamecheapConfig(user="user", api_key="key", client_ip="1.2.3.4"))

    def test_is_configured(self):
        self.assertTrue(self.gateway.is_configured)
        self.assertFalse(NamecheapGateway(NamecheapConfig()).is_configured)

    @patch("src.gateways.namecheap.httpx.get")
    def test_xml_response_parses_without_html_parser_warning(self, mock_get):
        mock_get.return_value = xml_response(CHECK_OK)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            self.gateway.check("idraulicoroma.it")

        self.assertFalse([w for w in caught if issubclass(w.category, XMLParsedAsHTMLWarning)])

    @patch("src.gateways.namecheap.httpx.get")
    def test_check_standard_domain(self, mock_get):
        mock_get.return_value = xml_response(CHECK_OK)

        result = self.gateway.check("idraulicoroma.it")

        self.assertEqual(result, {
            "domain": "idraulicoroma.it",
            "available": True,
            "premium": False,
            "premium_price": None,
        })
        params = mock_get.call_args.kwargs["params"]
        self.assertEqual(params["Command"], "namecheap.domains.check")
        self.assertEqual(params["DomainList"], "idraulicoroma.it")
        self.assertEqual(params["ClientIp"], "1.2.3.4")

    @patch("src.gateways.namecheap.httpx.get")
    def test_check_premium_domain(self, mock_get):
        mock_get.return_value = xml_response(CHECK_PREMIUM)

        result = self.gateway.check("best.com")

        self.assertTrue(result["premium"])
        self.assertEqual(result["premium_price"], 2500.0)

    @patch("src.gateways.namecheap.httpx.get")
    def test_api_error_status(self, mock_get):
        mock_get.return_value = xml_response(API_ERROR)

        with self.assertRaises(CollaboratorError) as ctx:
            self.gateway.check("idraulicoroma.it")

        self.assertIn("Parameter APIKey is invalid", ctx.exception.message)

    @patch("src.gateways.namecheap.httpx.get")
    def test_tld_price_uses_one_year_price(self, mock_get):
        mock_get.return_value = xml_response(PRICING)

        self.assertEqual(self.gateway.get_tld_price("it"), 11.48)
        self.assertEqual(mock_get.call_args.kwargs["params"]["ProductName"], "IT")

    @patch("src.gateways.namecheap.httpx.get")
    def test_set_vercel_dns(self, mock_get):
        mock_get.return_value = xml_response(DNS_OK)

        self.assertTrue(self.gateway.set_vercel_dns("idraulicoroma.it"))

        params = mock_get.call_args.kwargs["params"]
        self.assertEqual(params["SLD"], "idraulicoroma")
        self.assertEqual(params["TLD"], "it")
        self.assertEqual(params["Nameservers"], "ns1.vercel-dns.com,ns2.vercel-dns.com")

    @patch("src.gateways.namecheap.httpx.get")
    def test_register_unconfirmed(self, mock_get):
        mock_get.return_value = xml_response(DNS_OK)

        with self.assertRaises(CollaboratorError):
            self.gateway.register("idraulicoroma.it")

    def test_sandbox_url(self):
        gateway = NamecheapGateway(NamecheapConfig(user="u", api_key="k", sandbox=True))
        self.assertIn("sandbox", gateway.base_url)


if __name__ == "__main__":
    unittest.main()
