"""
Report builder: assembles the processing summary of a conversion run.
"""

from disclosure_sorter.core.classification import REVIEW_BUCKET, KeywordClassifier
from disclosure_sorter.core.models import BatchResult, DetailedStatistics, ProcessingSummary
from disclosure_sorter.utils.clock import Clock, format_timestamp, utc_now

# File name of the summary, at the root of the destination.
SUMMARY_FILE_NAME = "_resumen_procesamiento.json"

APPLIED_RULES = (
    "Campo 'tipoArea' convertido a 'nivelesResponsabilidad' con contenido del objeto original",
    "Campos 'no aplica' convertidos a campos vacíos",
    "Estructura específica generada según 'tipoProcedimiento'",
    "Clasificación automática según patrones de tipoProcedimiento",
    f"Objetos con múltiples procedimientos enviados a '{REVIEW_BUCKET}'",
    "Organización: categoria/archivo.json",
)


class ReportBuilder:
    """
    Builds a ProcessingSummary from a finished BatchResult.

    Source and destination paths are passed in by the caller and only
    echoed into the summary.
    """

    def __init__(self, classifier: KeywordClassifier | None = None, clock: Clock = utc_now):
        """
        Initialize report builder.

        Args:
            classifier: Classifier whose criteria are described in the summary
            clock: Source of the generation timestamp
        """
        self.classifier = classifier or KeywordClassifier()
        self.clock = clock

    def build(
        self,
        result: BatchResult,
        source_dir: str,
        destination_dir: str,
        total_files: int | None = None,
    ) -> ProcessingSummary:
        """
        Assemble the summary.

        Args:
            result: Finished batch result
            source_dir: Source directory to echo
            destination_dir: Destination directory to echo
            total_files: Number of record files produced; defaults to the
                         number of distinct output paths in the result

        Returns:
            ProcessingSummary
        """
        if total_files is None:
            total_files = len({f"{bucket}/{entry.file_name}" for bucket, entry in result.iter_entries()})

        return ProcessingSummary(
            generated_at=format_timestamp(self.clock()),
            source_dir=str(source_dir),
            destination_dir=str(destination_dir),
            total_files=total_files,
            classification=dict(result.counts),
            errors=list(result.errors),
            warnings=list(result.warnings),
            created_buckets=result.bucket_names,
            criteria=self.classifier.describe_criteria(),
            applied_rules=list(APPLIED_RULES),
            detailed_statistics=DetailedStatistics(
                per_category={bucket: len(entries) for bucket, entries in result.category_buckets.items()},
                per_review_bucket={bucket: len(entries) for bucket, entries in result.review_buckets.items()},
            ),
        )
