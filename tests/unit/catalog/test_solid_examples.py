"""Tests for the SOLID principle demonstrations, bad and good designs."""
from unittest.mock import Mock

import pytest

from design_catalog.catalog.solid.dependency_inversion import bad_design as dip_bad
from design_catalog.catalog.solid.dependency_inversion import good_design as dip_good
from design_catalog.catalog.solid.interface_segregation import bad_design as isp_bad
from design_catalog.catalog.solid.interface_segregation import good_design as isp_good
from design_catalog.catalog.solid.liskov_substitution import bad_design as lsp_bad
from design_catalog.catalog.solid.liskov_substitution import good_design as lsp_good
from design_catalog.catalog.solid.open_closed import bad_design as ocp_bad
from design_catalog.catalog.solid.open_closed import good_design as ocp_good
from design_catalog.catalog.solid.single_responsibility import bad_design as srp_bad
from design_catalog.catalog.solid.single_responsibility import good_design as srp_good
from design_catalog.domain.base.capabilities import supports
from design_catalog.domain.core.exceptions import UnsupportedOperationError


@pytest.mark.parametrize("module, banner", [
    (srp_bad, "--- Running Bad Design (Violating SRP) ---"),
    (srp_good, "--- Running Good Design (Adhering to SRP) ---"),
    (ocp_bad, "--- Running Bad Design (Violating OCP) ---"),
    (ocp_good, "--- Running Good Design (Adhering to OCP) ---"),
    (lsp_bad, "--- Running Bad Design (Violating LSP) ---"),
    (lsp_good, "--- Running Good Design (Adhering to LSP) ---"),
    (isp_bad, "--- Running Bad Design (Violating ISP) ---"),
    (isp_good, "--- Running Good Design (Adhering to ISP) ---"),
    (dip_bad, "--- Running Bad Design (Violating DIP) ---"),
    (dip_good, "--- Running Good Design (Adhering to DIP) ---"),
])
def test_run_is_framed_by_banners(output, module, banner):
    module.run(output)
    assert output.lines[0] == banner
    assert set(output.lines[-2]) == {"-"}
    assert output.lines[-1] == ""


class TestSingleResponsibility:
    """Test user registration with and without separated responsibilities."""

    def test_god_service_registers_user(self, output):
        assert srp_bad.UserService(output).register_user("test@example.com", "secret") is True
        assert output.lines == [
            "Database: Saving user 'test@example.com' to the database.",
            "Notification: Sending a welcome email to 'test@example.com'.",
            "User registration completed successfully.",
        ]

    def test_god_service_rejects_invalid_email(self, output):
        assert srp_bad.UserService(output).register_user("invalid", "secret") is False
        assert output.lines == ["Validation failed: Invalid email address."]

    def test_registration_orchestrates_collaborators(self, output):
        repository = srp_good.UserRepository(output)
        service = srp_good.UserRegistrationService(output, repository=repository)

        assert service.register("test@example.com", "secret") is True
        assert repository.saved_emails == ["test@example.com"]
        assert output.lines[-1] == "User registration completed successfully."

    def test_invalid_email_stops_registration(self, output):
        validator = Mock(spec=srp_good.UserValidator)
        validator.validate.return_value = False
        repository = Mock(spec=srp_good.UserRepository)
        notifier = Mock(spec=srp_good.NotificationService)

        service = srp_good.UserRegistrationService(output, validator, repository, notifier)

        assert service.register("invalid", "secret") is False
        repository.save.assert_not_called()
        notifier.send_welcome_email.assert_not_called()


class TestOpenClosed:
    """Test report generation."""

    def test_switch_based_generator(self, output):
        generator = ocp_bad.ReportGenerator(output)
        generator.generate_report(ocp_bad.ReportType.PDF)
        generator.generate_report(ocp_bad.ReportType.CSV)
        assert output.lines == ["Generating PDF report...", "Generating CSV report..."]

    def test_extensible_generators(self):
        generators = [ocp_good.PdfReportGenerator(), ocp_good.CsvReportGenerator(),
                      ocp_good.JsonReportGenerator()]
        assert [g.generate() for g in generators] == [
            "Generating PDF report...",
            "Generating CSV report...",
            "Generating JSON report...",
        ]


class TestLiskovSubstitution:
    """Test the broken square and its fix."""

    def test_square_couples_sides(self):
        square = lsp_bad.Square()
        square.width = 3
        assert square.height == 3
        square.height = 7
        assert square.width == 7

    def test_rectangle_meets_expectation(self, output):
        assert lsp_bad.AreaCalculator.calculate_and_print_area(lsp_bad.Rectangle(), output) == 50
        assert output.lines == ["Expected Area: 50, Actual Area: 50"]

    def test_square_violates_expectation(self, output):
        assert lsp_bad.AreaCalculator.calculate_and_print_area(lsp_bad.Square(), output) == 100
        assert output.lines == [
            "Expected Area: 50, Actual Area: 100",
            "LSP Violation Detected! The behavior is incorrect.",
        ]

    def test_independent_shapes(self):
        shapes = [lsp_good.Rectangle(width=5, height=10), lsp_good.Square(side=5)]
        assert all(isinstance(shape, lsp_good.Shape) for shape in shapes)
        assert [shape.get_area() for shape in shapes] == [50, 25]


class TestInterfaceSegregation:
    """Test fat and segregated device contracts."""

    @pytest.mark.parametrize("operation, message", [
        ("scan", "Scan functionality is not supported."),
        ("fax", "Fax functionality is not supported."),
    ])
    def test_simple_printer_cannot_honour_fat_contract(self, output, operation, message):
        printer = isp_bad.SimplePrinter(output)
        with pytest.raises(UnsupportedOperationError) as exc_info:
            getattr(printer, operation)("Photo.jpg")
        assert str(exc_info.value) == message
        assert exc_info.value.operation == operation

    def test_multifunction_printer_supports_everything(self, output):
        device = isp_bad.MultiFunctionPrinter(output)
        device.print("a")
        device.scan("b")
        device.fax("c")
        assert output.lines == ["Printing: a", "Scanning: b", "Faxing: c"]

    def test_bad_design_reports_unsupported_operation(self, output):
        isp_bad.run(output)
        assert "Error: Scan functionality is not supported." in output

    def test_simple_printer_only_prints(self, output):
        printer = isp_good.SimplePrinter(output)
        assert not hasattr(printer, "scan")
        assert not hasattr(printer, "fax")
        assert supports(printer, isp_good.DeviceCapability.PRINT)
        assert not supports(printer, isp_good.DeviceCapability.SCAN)

    def test_scan_with_available_uses_capability_tags(self, output):
        devices = [
            isp_good.SimplePrinter(output),
            isp_good.MultiFunctionPrinter(output),
            isp_good.StandaloneScanner(output),
        ]

        assert isp_good.scan_with_available(devices, "Contract.pdf") == 2
        assert output.lines == ["Scanning: Contract.pdf", "Scanning: Contract.pdf"]


class TestDependencyInversion:
    """Test hard-wired and injected message senders."""

    def test_hard_wired_sender(self, output):
        dip_bad.NotificationService(output).send_notification("hello")
        assert output.lines == ["Sending email: hello"]

    def test_injected_sender(self):
        sender = Mock(spec=dip_good.MessageSender)
        dip_good.NotificationService(sender).send_notification("hello")
        sender.send_message.assert_called_once_with("hello")

    @pytest.mark.parametrize("sender_class, expected", [
        (dip_good.EmailSender, "Sending email: hello"),
        (dip_good.SmsSender, "Sending SMS: hello"),
    ])
    def test_senders_are_interchangeable(self, output, sender_class, expected):
        dip_good.NotificationService(sender_class(output)).send_notification("hello")
        assert output.lines == [expected]


def area_through_contract(shape: lsp_good.Shape) -> int:
    return shape.get_area()


@pytest.mark.parametrize("shape, area", [
    (lsp_good.Rectangle(width=5, height=10), 50),
    (lsp_good.Square(side=5), 25),
])
def test_contract_call_matches_concrete_call(shape, area):
    assert area_through_contract(shape) == type(shape).get_area(shape) == area
