from .gemini import ANALYSIS_UNAVAILABLE, GeminiClient, first_candidate_text

__all__ = ["ANALYSIS_UNAVAILABLE", "GeminiClient", "first_candidate_text"]
