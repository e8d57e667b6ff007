from clang_format_invoker.models import FormatResult, FormatResults

from .models import FileReport, FileStatus, RunSummary


def format_result_to_report(result: FormatResult) -> FileReport:
    """Convert an internal dataclass result to an external Pydantic report"""
    if result.errors:
        status = FileStatus.FAILED
    elif result.modified:
        status = FileStatus.REFORMATTED
    else:
        status = FileStatus.UNCHANGED

    return FileReport(
        file_path=result.file_path or "<stdin>",
        status=status,
        message="\n".join(result.errors) or None,
    )


def format_results_to_summary(results: FormatResults) -> RunSummary:
    return RunSummary(
        total_files=results.total_files,
        reformatted_files=results.modified_files,
        failed_files=results.error_files,
    )
