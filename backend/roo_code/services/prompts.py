"""
Prompt templates for the assistant.

PERSONA_INSTRUCTION is sent with every request: as the system message for
providers with a system role (openrouter, openai), and prepended to the user
text with a blank line for the others (claude, gemini).
"""

PERSONA_INSTRUCTION = (
    "You are Roo Code, an AI assistant integrated into SPARC IDE. You help developers "
    "with code generation, explanation, refactoring, and following the SPARC methodology. "
    "Be concise, helpful, and provide practical solutions."
)

# Connection test: the reply must contain CONNECTION_ACK (case-insensitive)
CONNECTION_TEST_PROMPT = (
    'Hello, this is a connection test. Please respond with "Connection successful".'
)
CONNECTION_ACK = "connection successful"

# Placeholders: {code}
EXPLAIN_CODE_PROMPT = """Please explain the following code in detail, including what it does, how it works, and any potential improvements:

```
{code}
```"""

# Placeholders: {request}
GENERATE_CODE_PROMPT = """Generate clean, well-documented code for the following request. Include comments and follow best practices:

{request}

Please provide only the code with appropriate comments."""

# Placeholders: {instructions}, {code}
REFACTOR_CODE_PROMPT = """Please refactor the following code according to these instructions: {instructions}

Original code:
```
{code}
```

Please provide the refactored code with explanations of the changes made."""

# Placeholders: {code}
GENERATE_TESTS_PROMPT = """Generate comprehensive unit tests for the following code. Include edge cases and error scenarios:

```
{code}
```

Please provide complete test cases using appropriate testing framework conventions."""

# Placeholders: {phase_name}, {phase_description}, {context}
SPARC_ASSISTANCE_PROMPT = """I'm working on the {phase_name} phase of the SPARC methodology. {phase_description}.

Current context:
{context}

Please provide specific guidance and suggestions for this phase. Include actionable items and best practices."""

# Placeholders: {phase_name}, {document}
SPARC_REVIEW_PROMPT = """Please review this {phase_name} phase document for completeness and quality:

{document}

Provide feedback on:
1. Completeness - are all necessary sections covered?
2. Quality - is the content detailed and actionable?
3. SPARC methodology alignment - does it follow best practices?
4. Suggestions for improvement"""


def with_persona(prompt: str) -> str:
    """Prepend the persona instruction for providers without a system role."""
    return f"{PERSONA_INSTRUCTION}\n\n{prompt}"
