"""
Entry point for hotel campaign generation
"""

import asyncio

from hotel_campaigns import CampaignGenerator, WorkflowError
from hotel_campaigns.errors import ConfigurationError


def _ask_float(prompt: str):
    value = input(prompt).strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        print(f"  Ignoring non-numeric value: {value}")
        return None


def run_generation(generator: CampaignGenerator):
    """Prompt for hotel details and generate a campaign"""
    print("Enter the hotel details (or press Enter for the default example):")
    name = input("Hotel name: ").strip()
    
    if not name:
        hotel_info = {
            "name": "Ocean View Resort",
            "website": "https://oceanviewresort.example.com",
            "location": "Maui, Hawaii",
            "features": [
                "Beachfront location",
                "Luxury spa",
                "5-star dining",
                "Ocean view rooms",
                "Private beach access"
            ],
            "priceRange": "$400-$800 per night",
            "targetMarket": "Luxury travelers"
        }
        print(f"\nUsing example hotel: {hotel_info['name']}")
    else:
        hotel_info = {
            "name": name,
            "website": input("Hotel website: ").strip(),
            "location": input("Hotel location: ").strip()
        }
    
    result = asyncio.run(generator.generate_campaign(hotel_info))
    
    print("\n" + "=" * 80)
    print("WORKFLOW COMPLETED - Campaign:")
    print("=" * 80)
    print(f"\nKeywords: {', '.join(result['keywords'])}")
    print(f"Audience Locations: {', '.join(result['audienceLocations'])}")
    print(f"Daily Budget: ${result['dailyBudget']:g}")
    print("\nAd Copies:")
    for i, ad in enumerate(result["adCopies"], 1):
        print(f"  {i}. {ad['headline']}")
        print(f"     {ad['body']}")


def run_optimization(generator: CampaignGenerator):
    """Prompt for campaign metrics and print the recommendation"""
    print("Enter current campaign metrics (press Enter to skip a field):")
    metrics = {
        "CTR": _ask_float("CTR (%): "),
        "ROAS": _ask_float("ROAS (%): "),
        "currentBid": _ask_float("Current bid: "),
        "currentBudget": _ask_float("Current daily budget: ")
    }
    metrics = {key: value for key, value in metrics.items() if value is not None}
    
    if not metrics:
        print("✗ At least one metric is required")
        return
    
    result = asyncio.run(generator.optimize_campaign(metrics))
    recommendation = result["recommendations"]
    
    print("\n" + "=" * 80)
    print("WORKFLOW COMPLETED - Recommendation:")
    print("=" * 80)
    print(f"\nAction: {recommendation['action']}")
    if "newBid" in recommendation:
        print(f"New Bid: {recommendation['newBid']:g}")
    if "newBudget" in recommendation:
        print(f"New Budget: {recommendation['newBudget']:g}")
    print(f"Message: {recommendation.get('message', '')}")


def main():
    """Main CLI entry point"""
    print("=" * 80)
    print("Hotel Campaign Generator - Interactive Workflow")
    print("=" * 80)
    
    mode = input("\n[1] Generate a campaign  [2] Optimize a campaign: ").strip()
    
    try:
        # Optimization never calls the search service
        generator = CampaignGenerator.from_env(use_market_research=False if mode == "2" else None)
        
        if mode == "2":
            run_optimization(generator)
        else:
            run_generation(generator)
    except ConfigurationError as e:
        print(f"\n✗ Configuration error: {e}")
    except WorkflowError as e:
        print(f"\n✗ {e}")
        if e.retryable:
            print("  The service timed out. Please try again.")


if __name__ == "__main__":
    main()
