from hof.domain.report.util.di.provider import ReportProvider

__all__ = ["ReportProvider"]
