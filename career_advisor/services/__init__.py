from .credentials import CredentialManager
from .gemini import GeminiClient
from .recommender import RecommendationService
