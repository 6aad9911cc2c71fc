"""Default constants shared by the generation pipeline."""

UNTITLED_POST_TITLE = "Untitled Blog Post"

# File name shown for link sources that don't carry one
LINK_FILE_NAME = "Linked Video"

# Cosmetic progress labels, in display order
PROGRESS_STEPS: list[str] = [
    "Extracting audio from video...",
    "Transcribing audio with AI...",
    "Analyzing content structure...",
    "Generating blog post...",
    "Finalizing and saving...",
]

# Returned by the simulated transcriber regardless of the source
SAMPLE_TRANSCRIPT = """
Hello everyone, and welcome to today's presentation. In this video, I'll be discussing the importance of sustainable technology and how it's shaping our future.

First, let's talk about renewable energy sources. Solar and wind power have become increasingly efficient and cost-effective over the past decade. The technology has advanced to the point where these renewable sources are now competitive with traditional fossil fuels in many markets.

Next, I want to address the role of artificial intelligence in optimizing energy consumption. Smart grids and AI-powered systems can predict energy demand and automatically adjust supply accordingly, reducing waste and improving efficiency.

Another crucial aspect is the development of sustainable materials. Companies are now investing heavily in biodegradable plastics, recycled materials, and innovative alternatives that have minimal environmental impact.

The transportation sector is also undergoing a major transformation. Electric vehicles are becoming mainstream, and we're seeing significant improvements in battery technology that extend range while reducing charging times.

Finally, I believe that education and awareness are key to driving adoption of sustainable technologies. When people understand the benefits and have access to these solutions, they're more likely to make environmentally conscious choices.

Thank you for watching, and I hope this information has been helpful in understanding the current state and future potential of sustainable technology.
""".strip()
