"""Merchant category code (MCC) classification for card transactions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

import pandas as pd


class Category(str, Enum):
    FOOD_DINING = "Food & Dining"
    RETAIL_SHOPPING = "Retail & Shopping"
    TRANSPORTATION = "Transportation"
    ENTERTAINMENT = "Entertainment & Recreation"
    TRAVEL_LODGING = "Travel & Lodging"
    SERVICES = "Professional Services"
    PERSONAL_CARE = "Personal Care"
    HEALTHCARE = "Healthcare & Medical"
    UTILITIES = "Utilities & Telecom"
    GOVERNMENT = "Government & Taxes"
    FINANCIAL = "Financial Services"
    AUTOMOTIVE = "Automotive"
    HOME_GARDEN = "Home & Garden"
    EDUCATION = "Education"
    CHARITY = "Charitable & Non-Profit"
    BUSINESS = "Business Services"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MCCEntry:
    code: str
    description: str
    category: Category
    subcategory: str | None = None


UNKNOWN_DESCRIPTION = "Unknown Merchant Category"

_ENTRIES = (
    # 0001-0799
    MCCEntry("0742", "Veterinary Services", Category.HEALTHCARE),
    MCCEntry("0763", "Agricultural Cooperatives", Category.BUSINESS),

    # 1500-2999
    MCCEntry("1520", "General Contractors - Residential and Commercial", Category.SERVICES),
    MCCEntry("1771", "Concrete Work Contractors", Category.SERVICES),
    MCCEntry("1799", "Special Trade Contractors", Category.SERVICES),
    MCCEntry("2741", "Miscellaneous Publishing and Printing", Category.BUSINESS),
    MCCEntry("2791", "Typesetting, Plate Making", Category.BUSINESS),

    # 3000-3350
    MCCEntry("3000", "United Airlines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3001", "American Airlines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3002", "Pan American", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3003", "Delta Airlines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3004", "Northwest Airlines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3005", "British Airways", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3006", "Japan Airlines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3007", "Air France", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3008", "Lufthansa", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3009", "Air Canada", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3010", "KLM (Royal Dutch Airlines)", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3011", "Aeroflot", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3012", "Qantas", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3013", "Alitalia", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3014", "Saudi Arabian Airlines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3015", "Swiss International Air Lines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3016", "SAS (Scandinavian Airlines)", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3017", "South African Airways", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3018", "Varig (Brazilian Airlines)", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3026", "Emirates", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3029", "Brussels Airlines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3042", "Finnair", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3047", "Turkish Airlines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3049", "Tunisair", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3051", "Austrian Airlines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3102", "Iberia", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3136", "Qatar Airways", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3182", "LOT Polish Airlines", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3245", "EasyJet", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3246", "Ryanair", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("3301", "Wizz Air", Category.TRAVEL_LODGING, "Airlines"),

    # 3351-3441
    MCCEntry("3381", "Europcar", Category.TRAVEL_LODGING, "Car Rental"),
    MCCEntry("3389", "Avis", Category.TRAVEL_LODGING, "Car Rental"),
    MCCEntry("3390", "Hertz", Category.TRAVEL_LODGING, "Car Rental"),
    MCCEntry("3391", "Budget Rent-A-Car", Category.TRAVEL_LODGING, "Car Rental"),
    MCCEntry("3393", "National Car Rental", Category.TRAVEL_LODGING, "Car Rental"),

    # 3501-3800
    MCCEntry("3501", "Holiday Inns", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3502", "Best Western", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3503", "Sheraton", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3504", "Hilton", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3505", "Ramada", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3506", "La Quinta", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3507", "Days Inn", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3508", "Howard Johnson", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3509", "Red Roof Inns", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3533", "Ibis", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3535", "Marriott", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3543", "Four Seasons", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3548", "Melia", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("3640", "Hyatt", Category.TRAVEL_LODGING, "Hotels"),

    # 4000-4799
    MCCEntry("4111", "Local/Suburban Commuter Passenger Transportation", Category.TRANSPORTATION, "Public Transit"),
    MCCEntry("4112", "Passenger Railways", Category.TRANSPORTATION, "Rail"),
    MCCEntry("4119", "Ambulance Services", Category.HEALTHCARE, "Emergency"),
    MCCEntry("4121", "Taxicabs and Limousines", Category.TRANSPORTATION, "Taxi"),
    MCCEntry("4131", "Bus Lines", Category.TRANSPORTATION, "Bus"),
    MCCEntry("4411", "Cruise Lines", Category.TRAVEL_LODGING, "Cruise"),
    MCCEntry("4468", "Marinas, Marine Service", Category.TRANSPORTATION, "Marine"),
    MCCEntry("4511", "Airlines and Air Carriers", Category.TRAVEL_LODGING, "Airlines"),
    MCCEntry("4582", "Airports, Flying Fields, Airport Terminals", Category.TRANSPORTATION, "Airport"),
    MCCEntry("4722", "Travel Agencies, Tour Operators", Category.TRAVEL_LODGING, "Travel Services"),
    MCCEntry("4784", "Bridge and Road Fees, Tolls", Category.TRANSPORTATION, "Tolls"),
    MCCEntry("4789", "Transportation Services", Category.TRANSPORTATION),
    MCCEntry("4812", "Telecommunication Equipment", Category.UTILITIES, "Telecom Equipment"),
    MCCEntry("4814", "Telecommunication Services", Category.UTILITIES, "Phone Services"),
    MCCEntry("4816", "Computer Network Services", Category.UTILITIES, "Internet"),
    MCCEntry("4821", "Telegraph Services", Category.UTILITIES, "Communication"),
    MCCEntry("4829", "Wires, Money Orders", Category.FINANCIAL, "Money Transfer"),
    MCCEntry("4899", "Cable, Satellite, Pay Television, Radio", Category.UTILITIES, "Cable/Satellite"),
    MCCEntry("4900", "Utilities", Category.UTILITIES),

    # 5000-5699
    MCCEntry("5013", "Motor Vehicle Supplies and New Parts", Category.AUTOMOTIVE, "Parts"),
    MCCEntry("5021", "Office and Commercial Furniture", Category.BUSINESS, "Office Supplies"),
    MCCEntry("5039", "Construction Materials", Category.HOME_GARDEN, "Construction"),
    MCCEntry("5044", "Photographic, Photocopy, Microfilm Equipment", Category.BUSINESS, "Equipment"),
    MCCEntry("5045", "Computers, Computer Peripheral Equipment", Category.RETAIL_SHOPPING, "Electronics"),
    MCCEntry("5046", "Commercial Equipment", Category.BUSINESS, "Equipment"),
    MCCEntry("5047", "Medical, Dental, Ophthalmic, Hospital Equipment", Category.HEALTHCARE, "Equipment"),
    MCCEntry("5072", "Hardware Equipment and Supplies", Category.HOME_GARDEN, "Hardware"),
    MCCEntry("5099", "Durable Goods", Category.RETAIL_SHOPPING),
    MCCEntry("5111", "Stationery, Office Supplies", Category.BUSINESS, "Office Supplies"),
    MCCEntry("5139", "Commercial Footwear", Category.RETAIL_SHOPPING, "Footwear"),
    MCCEntry("5169", "Chemicals and Allied Products", Category.BUSINESS),
    MCCEntry("5192", "Books, Periodicals, Newspapers", Category.RETAIL_SHOPPING, "Books"),
    MCCEntry("5199", "Nondurable Goods", Category.RETAIL_SHOPPING),
    MCCEntry("5200", "Home Supply Warehouse Stores", Category.HOME_GARDEN, "Home Improvement"),
    MCCEntry("5211", "Lumber, Building Materials Stores", Category.HOME_GARDEN, "Construction"),
    MCCEntry("5231", "Glass, Paint, Wallpaper Stores", Category.HOME_GARDEN, "Home Improvement"),
    MCCEntry("5251", "Hardware Stores", Category.HOME_GARDEN, "Hardware"),
    MCCEntry("5261", "Lawn and Garden Supply Stores", Category.HOME_GARDEN, "Garden"),
    MCCEntry("5271", "Mobile Home Dealers", Category.HOME_GARDEN, "Real Estate"),
    MCCEntry("5300", "Wholesale Clubs", Category.RETAIL_SHOPPING, "Warehouse Clubs"),
    MCCEntry("5309", "Duty Free Stores", Category.RETAIL_SHOPPING, "Duty Free"),
    MCCEntry("5310", "Discount Stores", Category.RETAIL_SHOPPING, "Discount"),
    MCCEntry("5311", "Department Stores", Category.RETAIL_SHOPPING, "Department"),
    MCCEntry("5331", "Variety Stores", Category.RETAIL_SHOPPING, "Variety"),
    MCCEntry("5399", "Miscellaneous General Merchandise", Category.RETAIL_SHOPPING),
    MCCEntry("5411", "Grocery Stores, Supermarkets", Category.FOOD_DINING, "Groceries"),
    MCCEntry("5422", "Freezer and Locker Meat Provisioners", Category.FOOD_DINING, "Meat"),
    MCCEntry("5441", "Candy, Nut, Confectionery Stores", Category.FOOD_DINING, "Sweets"),
    MCCEntry("5451", "Dairy Products Stores", Category.FOOD_DINING, "Dairy"),
    MCCEntry("5462", "Bakeries", Category.FOOD_DINING, "Bakery"),
    MCCEntry("5499", "Miscellaneous Food Stores, Convenience Stores", Category.FOOD_DINING, "Convenience"),
    MCCEntry("5511", "Car and Truck Dealers", Category.AUTOMOTIVE, "Dealers"),
    MCCEntry("5521", "Car and Truck Dealers (Used Only)", Category.AUTOMOTIVE, "Used Cars"),
    MCCEntry("5532", "Automotive Tire Stores", Category.AUTOMOTIVE, "Tires"),
    MCCEntry("5533", "Automotive Parts and Accessories Stores", Category.AUTOMOTIVE, "Parts"),
    MCCEntry("5541", "Service Stations", Category.AUTOMOTIVE, "Gas Stations"),
    MCCEntry("5542", "Automated Fuel Dispensers", Category.AUTOMOTIVE, "Gas Stations"),
    MCCEntry("5551", "Boat Dealers", Category.AUTOMOTIVE, "Boats"),
    MCCEntry("5561", "Camper, Recreational Vehicle Dealers", Category.AUTOMOTIVE, "RV"),
    MCCEntry("5571", "Motorcycle Shops and Dealers", Category.AUTOMOTIVE, "Motorcycles"),
    MCCEntry("5592", "Motor Homes Dealers", Category.AUTOMOTIVE, "RV"),
    MCCEntry("5598", "Snowmobile Dealers", Category.AUTOMOTIVE, "Recreational"),
    MCCEntry("5599", "Miscellaneous Automotive, Aircraft, Farm Equipment Dealers", Category.AUTOMOTIVE),
    MCCEntry("5611", "Men's and Boy's Clothing and Accessories Stores", Category.RETAIL_SHOPPING, "Clothing"),
    MCCEntry("5621", "Women's Ready-To-Wear Stores", Category.RETAIL_SHOPPING, "Clothing"),
    MCCEntry("5631", "Women's Accessory and Specialty Stores", Category.RETAIL_SHOPPING, "Accessories"),
    MCCEntry("5641", "Children's and Infants' Wear Stores", Category.RETAIL_SHOPPING, "Clothing"),
    MCCEntry("5651", "Family Clothing Stores", Category.RETAIL_SHOPPING, "Clothing"),
    MCCEntry("5655", "Sports and Riding Apparel Stores", Category.RETAIL_SHOPPING, "Sports Apparel"),
    MCCEntry("5661", "Shoe Stores", Category.RETAIL_SHOPPING, "Footwear"),
    MCCEntry("5681", "Furriers and Fur Shops", Category.RETAIL_SHOPPING, "Specialty"),
    MCCEntry("5691", "Men's and Women's Clothing Stores", Category.RETAIL_SHOPPING, "Clothing"),
    MCCEntry("5699", "Miscellaneous Apparel and Accessory Shops", Category.RETAIL_SHOPPING, "Accessories"),

    # 5712-5999
    MCCEntry("5712", "Furniture, Home Furnishings, Equipment Stores", Category.HOME_GARDEN, "Furniture"),
    MCCEntry("5713", "Floor Covering Stores", Category.HOME_GARDEN, "Flooring"),
    MCCEntry("5714", "Drapery, Window Covering, Upholstery Stores", Category.HOME_GARDEN, "Window Treatments"),
    MCCEntry("5718", "Fireplaces, Fireplace Screens, Accessories Stores", Category.HOME_GARDEN, "Fireplace"),
    MCCEntry("5719", "Miscellaneous House Furnishing Specialty Stores", Category.HOME_GARDEN, "Home Decor"),
    MCCEntry("5722", "Household Appliance Stores", Category.HOME_GARDEN, "Appliances"),
    MCCEntry("5732", "Electronics Stores", Category.RETAIL_SHOPPING, "Electronics"),
    MCCEntry("5733", "Music Stores—Musical Instruments, Pianos, Sheet Music", Category.ENTERTAINMENT, "Music"),
    MCCEntry("5734", "Computer Software Stores", Category.RETAIL_SHOPPING, "Software"),
    MCCEntry("5735", "Record Stores", Category.ENTERTAINMENT, "Music"),
    MCCEntry("5811", "Caterers", Category.SERVICES, "Catering"),
    MCCEntry("5812", "Eating Places, Restaurants", Category.FOOD_DINING, "Restaurants"),
    MCCEntry("5813", "Drinking Places (Alcoholic Beverages), Bars, Taverns", Category.FOOD_DINING, "Bars"),
    MCCEntry("5814", "Fast Food Restaurants", Category.FOOD_DINING, "Fast Food"),
    MCCEntry("5815", "Digital Goods Media – Books, Movies, Music", Category.ENTERTAINMENT, "Digital Media"),
    MCCEntry("5816", "Digital Goods – Games", Category.ENTERTAINMENT, "Games"),
    MCCEntry("5817", "Digital Goods – Applications (Excluding Games)", Category.ENTERTAINMENT, "Apps"),
    MCCEntry("5818", "Digital Goods – Large Digital Goods Merchant", Category.ENTERTAINMENT, "Digital"),
    MCCEntry("5912", "Drug Stores and Pharmacies", Category.HEALTHCARE, "Pharmacy"),
    MCCEntry("5921", "Package Stores-Beer, Wine, Liquor", Category.FOOD_DINING, "Alcohol"),
    MCCEntry("5931", "Used Merchandise, Secondhand Stores", Category.RETAIL_SHOPPING, "Used Goods"),
    MCCEntry("5932", "Antique Reproductions", Category.RETAIL_SHOPPING, "Antiques"),
    MCCEntry("5933", "Pawn Shops", Category.FINANCIAL, "Pawn"),
    MCCEntry("5940", "Bicycle Shops", Category.RETAIL_SHOPPING, "Bicycles"),
    MCCEntry("5941", "Sporting Goods Stores", Category.RETAIL_SHOPPING, "Sports"),
    MCCEntry("5942", "Book Stores", Category.RETAIL_SHOPPING, "Books"),
    MCCEntry("5943", "Stationery, Office, School Supply Stores", Category.BUSINESS, "Office Supplies"),
    MCCEntry("5944", "Jewelry Stores, Watches, Clocks, Silverware Stores", Category.RETAIL_SHOPPING, "Jewelry"),
    MCCEntry("5945", "Hobby, Toy, Game Shops", Category.RETAIL_SHOPPING, "Toys"),
    MCCEntry("5946", "Camera and Photographic Supply Stores", Category.RETAIL_SHOPPING, "Photography"),
    MCCEntry("5947", "Gift, Card, Novelty, Souvenir Shops", Category.RETAIL_SHOPPING, "Gifts"),
    MCCEntry("5948", "Leather Goods, Luggage Stores", Category.RETAIL_SHOPPING, "Luggage"),
    MCCEntry("5949", "Fabric, Needlework, Piece Goods, Notions Stores", Category.RETAIL_SHOPPING, "Fabric"),
    MCCEntry("5950", "Glassware, Crystal Stores", Category.HOME_GARDEN, "Glassware"),
    MCCEntry("5960", "Direct Marketing - Insurance Services", Category.FINANCIAL, "Insurance"),
    MCCEntry("5962", "Direct Marketing - Travel", Category.TRAVEL_LODGING, "Travel Services"),
    MCCEntry("5963", "Door-To-Door Sales", Category.RETAIL_SHOPPING, "Direct Sales"),
    MCCEntry("5964", "Direct Marketing - Catalog Merchant", Category.RETAIL_SHOPPING, "Catalog"),
    MCCEntry("5965", "Direct Marketing - Combination Catalog and Retail Merchant", Category.RETAIL_SHOPPING, "Catalog"),
    MCCEntry("5966", "Direct Marketing - Outbound Telemarketing Merchant", Category.RETAIL_SHOPPING, "Telemarketing"),
    MCCEntry("5967", "Direct Marketing - Inbound Telemarketing Merchant", Category.RETAIL_SHOPPING, "Telemarketing"),
    MCCEntry("5968", "Direct Marketing - Continuity/Subscription Merchant", Category.RETAIL_SHOPPING, "Subscription"),
    MCCEntry("5969", "Direct Marketing - Not Elsewhere Classified", Category.RETAIL_SHOPPING, "Direct Marketing"),
    MCCEntry("5970", "Artist Supply, Craft Shops", Category.RETAIL_SHOPPING, "Arts & Crafts"),
    MCCEntry("5971", "Art Dealers and Galleries", Category.ENTERTAINMENT, "Art"),
    MCCEntry("5972", "Stamp and Coin Stores", Category.RETAIL_SHOPPING, "Collectibles"),
    MCCEntry("5973", "Religious Goods Stores", Category.RETAIL_SHOPPING, "Religious"),
    MCCEntry("5975", "Hearing Aids Sales and Supplies", Category.HEALTHCARE, "Medical Equipment"),
    MCCEntry("5976", "Orthopedic Goods, Prosthetic Devices", Category.HEALTHCARE, "Medical Equipment"),
    MCCEntry("5977", "Cosmetic Stores", Category.PERSONAL_CARE, "Cosmetics"),
    MCCEntry("5978", "Typewriter Stores", Category.BUSINESS, "Office Equipment"),
    MCCEntry("5983", "Fuel Dealers (Fuel Oil, Wood, Coal, Liquefied Petroleum)", Category.UTILITIES, "Fuel"),
    MCCEntry("5992", "Florists", Category.RETAIL_SHOPPING, "Flowers"),
    MCCEntry("5993", "Cigar Stores and Stands", Category.RETAIL_SHOPPING, "Tobacco"),
    MCCEntry("5994", "News Dealers and Newsstands", Category.RETAIL_SHOPPING, "News"),
    MCCEntry("5995", "Pet Shops, Pet Food, Supplies", Category.RETAIL_SHOPPING, "Pets"),
    MCCEntry("5996", "Swimming Pools Sales, Supplies", Category.HOME_GARDEN, "Pool"),
    MCCEntry("5997", "Electric Razor Stores", Category.PERSONAL_CARE, "Personal Care"),
    MCCEntry("5998", "Tent and Awning Shops", Category.HOME_GARDEN, "Outdoor"),
    MCCEntry("5999", "Miscellaneous Specialty Retail", Category.RETAIL_SHOPPING),

    # 6000-6513
    MCCEntry("6010", "Manual Cash Disburse", Category.FINANCIAL, "ATM"),
    MCCEntry("6011", "Automated Cash Disburse", Category.FINANCIAL, "ATM"),
    MCCEntry("6012", "Financial Institutions", Category.FINANCIAL, "Banking"),
    MCCEntry("6050", "Quasi Cash Merchant", Category.FINANCIAL),
    MCCEntry("6051", "Non-FI, Money Orders", Category.FINANCIAL, "Money Orders"),
    MCCEntry("6300", "Insurance", Category.FINANCIAL, "Insurance"),
    MCCEntry("6513", "Real Estate Agents, Property Managers", Category.SERVICES, "Real Estate"),

    # 7000-7699
    MCCEntry("7011", "Hotels, Motels, Inns, Resorts", Category.TRAVEL_LODGING, "Hotels"),
    MCCEntry("7032", "Sporting/Recreation Camps", Category.ENTERTAINMENT, "Camps"),
    MCCEntry("7033", "Trailer Parks, Campgrounds", Category.TRAVEL_LODGING, "Camping"),
    MCCEntry("7210", "Laundry, Cleaning Services", Category.SERVICES, "Cleaning"),
    MCCEntry("7211", "Laundries", Category.SERVICES, "Laundry"),
    MCCEntry("7216", "Dry Cleaners", Category.SERVICES, "Dry Cleaning"),
    MCCEntry("7217", "Carpet and Upholstery Cleaning", Category.SERVICES, "Cleaning"),
    MCCEntry("7221", "Photographic Studios", Category.SERVICES, "Photography"),
    MCCEntry("7230", "Barber and Beauty Shops", Category.PERSONAL_CARE, "Hair & Beauty"),
    MCCEntry("7251", "Shoe Repair/Hat Cleaning", Category.SERVICES, "Repair"),
    MCCEntry("7261", "Funeral Services, Crematories", Category.SERVICES, "Funeral"),
    MCCEntry("7273", "Dating/Escort Services", Category.SERVICES, "Personal"),
    MCCEntry("7276", "Tax Preparation Services", Category.SERVICES, "Tax"),
    MCCEntry("7277", "Debt Counseling Services", Category.FINANCIAL, "Credit Counseling"),
    MCCEntry("7278", "Buying/Shopping Clubs, Services", Category.RETAIL_SHOPPING, "Shopping Services"),
    MCCEntry("7295", "Baby Care Services", Category.SERVICES, "Childcare"),
    MCCEntry("7296", "Clothing Rental", Category.SERVICES, "Rental"),
    MCCEntry("7297", "Massage Parlors", Category.PERSONAL_CARE, "Massage"),
    MCCEntry("7298", "Health and Beauty Spas", Category.PERSONAL_CARE, "Spa"),
    MCCEntry("7299", "Miscellaneous Personal Services", Category.SERVICES),
    MCCEntry("7311", "Advertising Services", Category.BUSINESS, "Advertising"),
    MCCEntry("7321", "Consumer Credit Reporting Agencies", Category.FINANCIAL, "Credit Services"),
    MCCEntry("7333", "Commercial Photography, Art, Graphics", Category.BUSINESS, "Creative Services"),
    MCCEntry("7338", "Quick Copy, Reprography, Blueprinting", Category.BUSINESS, "Printing"),
    MCCEntry("7349", "Cleaning and Maintenance", Category.SERVICES, "Cleaning"),
    MCCEntry("7361", "Employment/Temp Agencies", Category.BUSINESS, "Employment"),
    MCCEntry("7372", "Computer Programming", Category.BUSINESS, "IT Services"),
    MCCEntry("7375", "Information Retrieval Services", Category.BUSINESS, "Information Services"),
    MCCEntry("7379", "Computer Maintenance and Repair", Category.BUSINESS, "IT Services"),
    MCCEntry("7392", "Consulting, Public Relations", Category.BUSINESS, "Consulting"),
    MCCEntry("7393", "Detective Agencies", Category.SERVICES, "Security"),
    MCCEntry("7394", "Equipment Rental", Category.SERVICES, "Rental"),
    MCCEntry("7395", "Photo Developing", Category.SERVICES, "Photography"),
    MCCEntry("7399", "Miscellaneous Business Services", Category.BUSINESS),
    MCCEntry("7512", "Automobile Rental Agency", Category.TRAVEL_LODGING, "Car Rental"),
    MCCEntry("7513", "Truck/Utility Trailer Rental", Category.SERVICES, "Vehicle Rental"),
    MCCEntry("7519", "Recreational Vehicle Rental", Category.TRAVEL_LODGING, "RV Rental"),
    MCCEntry("7523", "Parking Lots, Garages", Category.TRANSPORTATION, "Parking"),
    MCCEntry("7534", "Tire Retreading and Repair", Category.AUTOMOTIVE, "Tire Services"),
    MCCEntry("7535", "Auto Paint Shops", Category.AUTOMOTIVE, "Auto Services"),
    MCCEntry("7538", "Auto Service Shops", Category.AUTOMOTIVE, "Auto Services"),
    MCCEntry("7542", "Car Washes", Category.AUTOMOTIVE, "Car Wash"),
    MCCEntry("7549", "Towing Services", Category.AUTOMOTIVE, "Towing"),
    MCCEntry("7622", "Electronics Repair Shops", Category.SERVICES, "Electronics Repair"),
    MCCEntry("7623", "A/C, Refrigeration Repair", Category.SERVICES, "Appliance Repair"),
    MCCEntry("7629", "Small Appliance Repair", Category.SERVICES, "Appliance Repair"),
    MCCEntry("7631", "Watch, Jewelry Repair", Category.SERVICES, "Jewelry Repair"),
    MCCEntry("7641", "Furniture Repair, Refinishing", Category.SERVICES, "Furniture Repair"),
    MCCEntry("7692", "Welding Repair", Category.SERVICES, "Welding"),
    MCCEntry("7699", "Miscellaneous Repair Shops", Category.SERVICES, "Repair"),

    # 7800-7999
    MCCEntry("7800", "Government Lottery", Category.ENTERTAINMENT, "Gambling"),
    MCCEntry("7801", "Internet Gambling", Category.ENTERTAINMENT, "Gambling"),
    MCCEntry("7802", "Horse/Dog Racing", Category.ENTERTAINMENT, "Gambling"),
    MCCEntry("7829", "Motion Picture/Video Tape Production", Category.ENTERTAINMENT, "Media Production"),
    MCCEntry("7832", "Motion Picture Theaters", Category.ENTERTAINMENT, "Movies"),
    MCCEntry("7841", "Video Tape Rental Stores", Category.ENTERTAINMENT, "Video Rental"),
    MCCEntry("7911", "Dance Halls, Studios, Schools", Category.ENTERTAINMENT, "Dance"),
    MCCEntry("7922", "Theatrical Ticket Agencies", Category.ENTERTAINMENT, "Tickets"),
    MCCEntry("7929", "Bands, Orchestras", Category.ENTERTAINMENT, "Music"),
    MCCEntry("7932", "Pool and Billiard Halls", Category.ENTERTAINMENT, "Pool Halls"),
    MCCEntry("7933", "Bowling Alleys", Category.ENTERTAINMENT, "Bowling"),
    MCCEntry("7941", "Commercial Sports, Professional Sports Clubs", Category.ENTERTAINMENT, "Sports"),
    MCCEntry("7991", "Tourist Attractions and Exhibits", Category.ENTERTAINMENT, "Attractions"),
    MCCEntry("7992", "Golf Courses - Public", Category.ENTERTAINMENT, "Golf"),
    MCCEntry("7993", "Video Amusement Game Supplies", Category.ENTERTAINMENT, "Games"),
    MCCEntry("7994", "Video Game Arcades", Category.ENTERTAINMENT, "Arcades"),
    MCCEntry("7995", "Betting/Casino Gambling", Category.ENTERTAINMENT, "Gambling"),
    MCCEntry("7996", "Amusement Parks, Carnivals", Category.ENTERTAINMENT, "Amusement Parks"),
    MCCEntry("7997", "Country Clubs", Category.ENTERTAINMENT, "Clubs"),
    MCCEntry("7998", "Aquariums, Zoos, Dolphinariums", Category.ENTERTAINMENT, "Zoos"),
    MCCEntry("7999", "Recreation Services", Category.ENTERTAINMENT),

    # 8000-8999
    MCCEntry("8011", "Doctors", Category.HEALTHCARE, "Physicians"),
    MCCEntry("8021", "Dentists, Orthodontists", Category.HEALTHCARE, "Dental"),
    MCCEntry("8031", "Osteopaths", Category.HEALTHCARE, "Specialists"),
    MCCEntry("8041", "Chiropractors", Category.HEALTHCARE, "Chiropractic"),
    MCCEntry("8042", "Optometrists, Ophthalmologists", Category.HEALTHCARE, "Eye Care"),
    MCCEntry("8043", "Opticians, Eyeglasses", Category.HEALTHCARE, "Eye Care"),
    MCCEntry("8049", "Podiatrists, Chiropodists", Category.HEALTHCARE, "Specialists"),
    MCCEntry("8050", "Nursing/Personal Care", Category.HEALTHCARE, "Nursing"),
    MCCEntry("8062", "Hospitals", Category.HEALTHCARE, "Hospitals"),
    MCCEntry("8071", "Medical and Dental Labs", Category.HEALTHCARE, "Labs"),
    MCCEntry("8099", "Medical Services", Category.HEALTHCARE),
    MCCEntry("8111", "Legal Services, Attorneys", Category.SERVICES, "Legal"),
    MCCEntry("8220", "Colleges, Universities", Category.EDUCATION, "Higher Education"),
    MCCEntry("8244", "Schools, Business and Secretarial", Category.EDUCATION, "Business Schools"),
    MCCEntry("8249", "Schools, Trade/Vocational", Category.EDUCATION, "Trade Schools"),
    MCCEntry("8299", "Schools and Educational Services", Category.EDUCATION),
    MCCEntry("8398", "Charitable and Social Service Organizations", Category.CHARITY),
    MCCEntry("8641", "Civic, Social, Fraternal Associations", Category.CHARITY, "Associations"),
    MCCEntry("8651", "Political Organizations", Category.CHARITY, "Political"),
    MCCEntry("8661", "Religious Organizations", Category.CHARITY, "Religious"),
    MCCEntry("8675", "Automobile Associations", Category.AUTOMOTIVE, "Auto Associations"),
    MCCEntry("8699", "Membership Organizations", Category.CHARITY),
    MCCEntry("8931", "Accounting/Bookkeeping Services", Category.SERVICES, "Accounting"),
    MCCEntry("8999", "Professional Services", Category.SERVICES),

    # 9000-9999
    MCCEntry("9211", "Court Costs, Alimony, Child Support", Category.GOVERNMENT, "Court Fees"),
    MCCEntry("9222", "Fines - Government Administrative Entities", Category.GOVERNMENT, "Fines"),
    MCCEntry("9311", "Tax Payments - Government Administrative Entities", Category.GOVERNMENT, "Taxes"),
    MCCEntry("9399", "Government Services", Category.GOVERNMENT),
    MCCEntry("9401", "Intra-Government Purchases", Category.GOVERNMENT),
    MCCEntry("9402", "Postal Services - Government Only", Category.GOVERNMENT, "Postal"),
    MCCEntry("9405", "U.S. Federal Government Agencies or Departments", Category.GOVERNMENT, "Federal"),
)

MCC_MAPPING = MappingProxyType({entry.code: entry for entry in _ENTRIES})

# (low, high, description, category, subcategory); ordered and disjoint.
MCC_RANGES = (
    (1, 1499, "Agricultural Services", Category.BUSINESS, None),
    (1500, 2999, "Contracted Services", Category.SERVICES, None),
    (3000, 3299, "Airlines", Category.TRAVEL_LODGING, "Airlines"),
    (3351, 3441, "Car Rental", Category.TRAVEL_LODGING, "Car Rental"),
    (3501, 3999, "Lodging/Hotels", Category.TRAVEL_LODGING, "Hotels"),
    (4000, 4799, "Transportation Services", Category.TRANSPORTATION, None),
    (4800, 4999, "Utility Services", Category.UTILITIES, None),
    (5000, 5599, "Retail Outlet Services", Category.RETAIL_SHOPPING, None),
    (5600, 5699, "Clothing Stores", Category.RETAIL_SHOPPING, "Clothing"),
    (5700, 5799, "Miscellaneous Stores", Category.RETAIL_SHOPPING, None),
    (5800, 5999, "Restaurants/Food Services", Category.FOOD_DINING, None),
    (6000, 6999, "Financial Services", Category.FINANCIAL, None),
    (7000, 7299, "Business Services", Category.BUSINESS, None),
    (7300, 7699, "Personal Services", Category.SERVICES, None),
    (7800, 7999, "Recreation/Entertainment Services", Category.ENTERTAINMENT, None),
    (8000, 8999, "Professional Services", Category.SERVICES, None),
    (9000, 9999, "Government Services", Category.GOVERNMENT, None),
)

_PREFIX_PATTERN = re.compile(r"^[A-Za-z]+,?")
_LEADING_INTEGER = re.compile(r"^([+-]?)(\d+)")


def normalize_mcc(code) -> str:
    """Strip whitespace and a leading country prefix such as ``"CH,"``."""
    text = "" if code is None else str(code).strip()
    return _PREFIX_PATTERN.sub("", text).strip()


def infer_mcc_entry(code: str) -> MCCEntry:
    """Classify a code missing from the table by its numeric range."""
    match = _LEADING_INTEGER.match(code)
    if match is None:
        return MCCEntry(code, UNKNOWN_DESCRIPTION, Category.OTHER)

    sign, digits = match.group(1), match.group(2).lstrip("0")
    # Brackets span 1..9999; longer runs never reach int().
    if sign == "-" or len(digits) > 4:
        return MCCEntry(code, UNKNOWN_DESCRIPTION, Category.OTHER)

    value = int(digits or "0")
    for low, high, description, category, subcategory in MCC_RANGES:
        if low <= value <= high:
            return MCCEntry(code, description, category, subcategory)
    return MCCEntry(code, UNKNOWN_DESCRIPTION, Category.OTHER)


def classify(code) -> MCCEntry:
    """Return the MCC entry for a raw code; never raises."""
    clean = normalize_mcc(code)
    entry = MCC_MAPPING.get(clean)
    if entry is not None:
        return entry
    return infer_mcc_entry(clean)


def codes_for_category(category: Category | str) -> list[MCCEntry]:
    """All table entries mapped to ``category``."""
    target = Category(category)
    return [entry for entry in MCC_MAPPING.values() if entry.category is target]


def all_categories() -> list[str]:
    return [category.value for category in Category]


def category_stats() -> pd.DataFrame:
    """Number of table codes per category, largest first."""
    rows = [
        {"Category": category.value, "CodeCount": len(codes_for_category(category))}
        for category in Category
    ]
    return (
        pd.DataFrame(rows)
        .sort_values("CodeCount", ascending=False, kind="stable")
        .reset_index(drop=True)
    )


def assign_categories(df: pd.DataFrame, mcc_column: str = "trx_mcc") -> pd.DataFrame:
    """Add Category, Subcategory and MccDescription columns from an MCC column."""
    out = df.copy()
    if out.empty:
        for col in ["Category", "Subcategory", "MccDescription"]:
            out[col] = pd.Series(dtype=object)
        return out

    codes = out[mcc_column] if mcc_column in out.columns else pd.Series([""] * len(out), index=out.index)
    entries = codes.map(classify)
    out["Category"] = entries.map(lambda entry: entry.category.value)
    out["Subcategory"] = entries.map(lambda entry: entry.subcategory or "")
    out["MccDescription"] = entries.map(lambda entry: entry.description)
    return out
