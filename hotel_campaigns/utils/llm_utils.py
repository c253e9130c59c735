"""
Utility functions for LLM initialization
"""

import os

from .. import config
from ..errors import ConfigurationError


def get_llm(temperature: float = None):
    """
    Initialize and return the chat model selected by environment configuration.
    
    Args:
        temperature: Sampling temperature (default: LLM_TEMPERATURE, 0.3)
    
    Returns:
        LLM instance (either ChatOpenAI or ChatGroq)
    
    Environment Variables:
        USE_GROQ_MODEL: "true" to use Groq, otherwise OpenAI is used
        OPENAI_API_KEY: OpenAI API key (required unless USE_GROQ_MODEL=true)
        OPENAI_MODEL: OpenAI model name (default: "gpt-4o")
        GROQ_API_KEY: Groq API key (required if USE_GROQ_MODEL=true)
        GROQ_MODEL: Groq model name (e.g., "openai/gpt-oss-120b", "llama-3.1-70b-versatile")
    """
    if temperature is None:
        temperature = config.LLM_TEMPERATURE

    use_groq = os.getenv("USE_GROQ_MODEL", "false").lower() == "true"
    
    if use_groq:
        from langchain_groq import ChatGroq
        
        api_key = os.getenv("GROQ_API_KEY")
        if not api_key:
            raise ConfigurationError("GROQ_API_KEY environment variable is required when USE_GROQ_MODEL=true")
        
        return ChatGroq(
            temperature=temperature,
            model_name=os.getenv("GROQ_MODEL", config.GROQ_MODEL),
            groq_api_key=api_key
        )

    from langchain_openai import ChatOpenAI
    
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY environment variable is not set")
    
    return ChatOpenAI(
        temperature=temperature,
        model_name=os.getenv("OPENAI_MODEL", config.OPENAI_MODEL),
        openai_api_key=api_key
    )
