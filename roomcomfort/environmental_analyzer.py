"""
Environmental analyzer module for the Room Comfort Monitor.

This module contains the EnvironmentalAnalyzer class, the single entry point
of the analysis engine. It validates a sensor reading, applies defaults,
classifies every parameter, aggregates the overall status, and builds the
analysis text, recommendations and confidence from the same statuses.

The analyzer owns no mutable state. The collaborators it composes are
injected (or defaulted) at construction and never change afterwards, so one
instance may be shared freely across threads.
"""

from typing import Optional

from .analysis_text import AnalysisTextGenerator
from .confidence import ConfidenceEstimator
from .environmental_analysis import EnvironmentalAnalysis
from .parameter_classifier import ParameterClassifier
from .recommendation_generator import RecommendationGenerator
from .sensor_reading import InvalidReading, SensorReading
from .status_aggregator import StatusAggregator


class EnvironmentalAnalyzer:
    """
    Rule-based analyzer turning a sensor reading into an EnvironmentalAnalysis.

    Any collaborator can be replaced, e.g. to plug in an alternative
    classification strategy behind the same analyze() contract.
    """

    def __init__(
        self,
        classifier: Optional[ParameterClassifier] = None,
        aggregator: Optional[StatusAggregator] = None,
        text_generator: Optional[AnalysisTextGenerator] = None,
        recommendation_generator: Optional[RecommendationGenerator] = None,
        confidence_estimator: Optional[ConfidenceEstimator] = None
    ) -> None:
        self.classifier = classifier or ParameterClassifier()
        self.aggregator = aggregator or StatusAggregator()
        self.text_generator = text_generator or AnalysisTextGenerator()
        self.recommendation_generator = recommendation_generator or RecommendationGenerator()
        self.confidence_estimator = confidence_estimator or ConfidenceEstimator()

    def analyze(self, reading: SensorReading) -> EnvironmentalAnalysis:
        """
        Analyzes a single sensor reading.

        Steps:
        1. Validate the reading and apply defaults for missing fields
        2. Classify all five parameters
        3. Aggregate the overall status
        4. Generate text and recommendations from those same statuses
        5. Estimate the confidence

        Args:
            reading: The sensor reading to analyze; all measurements are optional

        Returns:
            A new EnvironmentalAnalysis for this reading

        Raises:
            InvalidReading: If a present measurement is non-numeric, NaN or infinite
        """
        # Step 1: Validate and resolve defaults
        valid, reason = reading.validate()
        if not valid:
            raise InvalidReading(reason)
        values = reading.resolved_values()

        # Step 2: Per-parameter classification
        statuses = self.classifier.classify_values(values)

        # Step 3: Overall status
        overall_status = self.aggregator.aggregate(statuses)

        # Step 4: Text and recommendations share the statuses above
        analysis_text = self.text_generator.describe(reading, statuses)
        recommendations = self.recommendation_generator.recommend(reading, statuses)

        # Step 5: Confidence
        confidence = self.confidence_estimator.estimate(values)

        return EnvironmentalAnalysis(
            overall_status=overall_status,
            statuses=statuses,
            analysis_text=analysis_text,
            recommendations=recommendations,
            confidence=confidence,
        )


_DEFAULT_ANALYZER = EnvironmentalAnalyzer()


def analyze(reading: SensorReading) -> EnvironmentalAnalysis:
    """
    Analyzes a reading with the default rule-based analyzer.

    Args:
        reading: The sensor reading to analyze

    Returns:
        The EnvironmentalAnalysis for the reading

    Raises:
        InvalidReading: If a present measurement is non-numeric, NaN or infinite
    """
    return _DEFAULT_ANALYZER.analyze(reading)
