"""
Basic analysis example.

Demonstrates normalizing, classifying and summarizing a list of links.
"""

from link_analyzer import AnalyzeOptions, analyze_links, top_entries
from link_analyzer.classification import URLClassifier
from link_analyzer.export import to_frame
from link_analyzer.normalization import normalize_line

SAMPLE_LINKS = [
    "https://vercel.com",
    "nextjs.org/docs",
    "http://example.com/path?utm_source=test",
    "www.google.com/search?q=echarts",
    "https://github.com/vercel/next.js#readme",
    "nota-url",
    "//cdn.example.com/assets/app.js?v=1",
]


def main():
    """Run basic analysis example."""
    print("=" * 60)
    print("Link Analyzer: Basic Analysis Example")
    print("=" * 60)

    # Example 1: Normalize and classify a single line
    print("\n1. Single Link")
    print("-" * 60)

    raw = "www.Example.com/path?a=1&a=2#top"
    normalized = normalize_line(raw, assume_https=True)
    result = URLClassifier().classify(normalized)

    print(f"Raw:        {raw}")
    print(f"Normalized: {normalized}")
    print(f"Valid:      {result.is_valid}")
    print(f"Hostname:   {result.hostname}")
    print(f"Domain:     {result.domain}")
    print(f"TLD:        {result.tld}")
    print(f"Query pairs: {result.query_params}")

    # Example 2: Analyze a batch
    print("\n\n2. Batch Analysis")
    print("-" * 60)

    analysis = analyze_links(
        "\n".join(SAMPLE_LINKS), AnalyzeOptions(assume_https=True, dedupe=True)
    )
    metrics = analysis.metrics

    print(f"Total: {metrics.total}  Valid: {metrics.valid}  Invalid: {metrics.invalid}")
    print(f"Unique domains: {metrics.unique_domains}")
    print(f"Average length: {metrics.avg_length:.1f}")

    print("\nTop domains:")
    for domain, count in top_entries(analysis.distributions.domain, 5):
        print(f"  {domain:<30} {count}")

    print("\nRows:")
    print(to_frame(analysis).select("raw", "isValid", "domain", "tld"))


if __name__ == "__main__":
    main()
